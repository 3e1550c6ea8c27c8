"""Core evaluator for the Rinha interpreter.

Strict, call-by-value recursive descent over the AST. Each Term type has a
form handler in rinha.evaluation.forms; the evaluator passes itself to the
handler so forms recurse without importing this module.
"""

from __future__ import annotations

from rinha import RinhaValue
from rinha.errors import RinhaSyntaxError
from rinha.evaluation.forms import TERM_FORMS
from rinha.evaluation.runtime import Runtime
from rinha.types.environment import Environment
from rinha.types.terms import Term


def evaluate(term: Term, env: Environment, runtime: Runtime | None = None) -> RinhaValue:
    """
    Evaluate `term` in `env` and return its value.

    Language errors are raised as RinhaError subclasses carrying the location
    of the failing node. They propagate unchanged; nothing is caught here.
    """
    if runtime is None:
        runtime = Runtime()

    form = TERM_FORMS.get(type(term))
    if form is None:
        raise RinhaSyntaxError(f"Cannot evaluate {type(term).__name__} term", getattr(term, "location", None))
    return form(term, env, runtime, evaluate)
