from rinha import EvaluatorFn, RinhaValue
from rinha.builtins import BINARY_OPERATORS
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Binary


def binary_form(term: Binary, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    """
    lhs <op> rhs
    Both sides are evaluated left to right before the operator is looked at,
    so `&&` and `||` never short-circuit.
    """
    lhs = evaluate_fn(term.lhs, env, runtime)
    rhs = evaluate_fn(term.rhs, env, runtime)
    return BINARY_OPERATORS[term.op](lhs, rhs, term.location)
