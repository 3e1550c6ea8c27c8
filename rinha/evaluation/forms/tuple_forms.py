from rinha import EvaluatorFn, RinhaValue
from rinha.errors import RinhaTypeError
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import First, Second, Tuple
from rinha.types.values import is_tuple


def tuple_form(term: Tuple, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    first = evaluate_fn(term.first, env, runtime)
    second = evaluate_fn(term.second, env, runtime)
    return (first, second)


def first_form(term: First, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    value = evaluate_fn(term.value, env, runtime)
    if not is_tuple(value):
        raise RinhaTypeError("Cannot access first of a non tuple argument", term.location)
    return value[0]


def second_form(term: Second, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    value = evaluate_fn(term.value, env, runtime)
    if not is_tuple(value):
        raise RinhaTypeError("Cannot access second of a non tuple argument", term.location)
    return value[1]
