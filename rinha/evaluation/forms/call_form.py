import logging

from rinha import EvaluatorFn, RinhaValue
from rinha.errors import RinhaArityError, RinhaTypeError
from rinha.evaluation.fib import fib
from rinha.evaluation.runtime import Runtime
from rinha.types.closure import Closure
from rinha.types.environment import Environment
from rinha.types.terms import Call, Var
from rinha.types.values import is_int

FIB_NAME = "fib"

_logger = logging.getLogger("CallForm")

_NOT_EVALUATED = object()


def _is_fib_call(term: Call) -> bool:
    return (
        isinstance(term.callee, Var)
        and term.callee.text == FIB_NAME
        and len(term.arguments) == 1
    )


def call_form(term: Call, env: Environment, runtime: Runtime, evaluate_fn: EvaluatorFn) -> RinhaValue:
    """
    callee(arguments...)

    `fib(n)` with any integer n is answered natively (0 for n < 0), whatever
    (if anything) the program bound to `fib`. Otherwise the callee must be a
    closure of matching arity; arguments are evaluated left to right in the
    caller's frame and the body runs in a child of the closure's frame.
    """
    first_arg = _NOT_EVALUATED
    if runtime.fib_fast_path and _is_fib_call(term):
        # Evaluated once; reused below if the fast path does not apply.
        first_arg = evaluate_fn(term.arguments[0], env, runtime)
        if is_int(first_arg):
            _logger.debug("fib fast path for n=%d at %s", first_arg, term.location)
            return fib(first_arg, runtime.fib_matrix_threshold)

    fn = evaluate_fn(term.callee, env, runtime)
    if not isinstance(fn, Closure):
        raise RinhaTypeError("Calling a not callable", term.location)
    if len(term.arguments) != fn.arity:
        raise RinhaArityError(
            "Arguments declaration differs parameters declaration", term.location
        )

    args = []
    for i, arg in enumerate(term.arguments):
        if i == 0 and first_arg is not _NOT_EVALUATED:
            args.append(first_arg)
        else:
            args.append(evaluate_fn(arg, env, runtime))

    frame = fn.extend_env(args, term.location)
    return evaluate_fn(fn.body, frame, runtime)
