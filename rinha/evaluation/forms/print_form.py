from rinha import EvaluatorFn, RinhaValue
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Print
from rinha.types.values import Void, display


def print_form(term: Print, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    """
    print(value)
    Writes the display form of any value followed by a newline; always yields Void.
    """
    value = evaluate_fn(term.value, env, runtime)
    runtime.write_line(display(value))
    return Void
