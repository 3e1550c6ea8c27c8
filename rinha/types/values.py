"""Runtime values for Rinha.

Values are plain Python objects wherever one fits:

- Bool  -> bool
- Int   -> int (unbounded)
- Str   -> str
- Tuple -> 2-element tuple
- Closure -> rinha.types.closure.Closure
- Void  -> the `Void` singleton below

Because `bool` is a subclass of `int` and `True == 1` in Python, equality and
type tests must go through the helpers here instead of `==`/`isinstance`.
"""

from __future__ import annotations

from rinha import RinhaValue


class VoidType:
    """Result of `print`; displays as nothing."""

    __slots__ = ()

    def __repr__(self):
        return "Void"

    def __str__(self):
        return ""

    def __eq__(self, other):
        return isinstance(other, VoidType)

    def __hash__(self):
        return hash(VoidType)


Void = VoidType()


def is_int(value: RinhaValue) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_str(value: RinhaValue) -> bool:
    return isinstance(value, str)


def is_tuple(value: RinhaValue) -> bool:
    return isinstance(value, tuple)


def values_equal(a: RinhaValue, b: RinhaValue) -> bool:
    """Structural equality; values of different variants are never equal."""
    if type(a) is not type(b):
        return False
    if isinstance(a, tuple):
        return values_equal(a[0], b[0]) and values_equal(a[1], b[1])
    return a == b


def display(value: RinhaValue) -> str:
    """Text written by `print` and used by string concatenation."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, tuple):
        return f"({display(value[0])}, {display(value[1])})"
    return str(value)
