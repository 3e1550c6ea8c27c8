from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.runtime import Runtime
from rinha.types.closure import Closure
from rinha.types.environment import Environment
from rinha.types.terms import Function


def function_form(term: Function, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    # Capture the live frame, not a copy: a `let` binding this closure is
    # added to `env` afterwards and must be visible from the body.
    return Closure(term.parameters, term.value, env)
