from rinha import EvaluatorFn, RinhaValue
from rinha.errors import RinhaTypeError
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import If


def if_form(term: If, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    cond = evaluate_fn(term.condition, env, runtime)

    # No truthiness: the condition must be a boolean.
    if cond is True:
        return evaluate_fn(term.then, env, runtime)
    elif cond is False:
        return evaluate_fn(term.otherwise, env, runtime)
    raise RinhaTypeError(
        "Condition expression not resolve to a boolean primitive", term.location
    )
