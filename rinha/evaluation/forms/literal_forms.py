from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Bool, Int, Str


def bool_form(term: Bool, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    return bool(term.value)


def int_form(term: Int, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    return int(term.value)


def str_form(term: Str, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    return term.value
