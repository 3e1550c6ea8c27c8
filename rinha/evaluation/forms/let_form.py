from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Let


def let_form(term: Let, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    """
    let name = value; next
    The binding goes into the current frame in place. A function literal in
    `value` captured this same frame, so after `define` it can see its own
    name (self recursion) and any names bound by later lets (mutual recursion).
    """
    value = evaluate_fn(term.value, env, runtime)
    env.define(term.name.text, value)
    return evaluate_fn(term.next, env, runtime)
