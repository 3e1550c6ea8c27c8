from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Var


def var_form(term: Var, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    return env.lookup(term.text, term.location)
