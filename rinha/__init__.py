# Core type aliases for Rinha's data model.
# Runtime values are plain Python objects (bool, int, str, 2-tuples) plus the
# Closure and Void types defined in rinha.types. Terms are the frozen
# dataclasses in rinha.types.terms.
#
# Naming guidance:
# - Term:        Use in reader/evaluator code to denote syntax (AST nodes).
# - RinhaValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
RinhaValue = Any

# Evaluator function type: handed to every term form so forms never import
# the evaluator module directly.
EvaluatorFn = Callable[..., RinhaValue]

__version__ = "0.1.0"
