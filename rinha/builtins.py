from __future__ import annotations
from typing import Callable

from rinha import RinhaValue
from rinha.errors import RinhaTypeError, RinhaArithmeticError
from rinha.types.location import Location
from rinha.types.terms import BinaryOp
from rinha.types.values import display, is_int, is_str, values_equal

BinaryOperator = Callable[[RinhaValue, RinhaValue, Location], RinhaValue]

# Both operands are always evaluated before any of these run; they only
# decide how the two values combine.

# -------------------------------
# Arithmetic
# -------------------------------
def add(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    if is_int(lhs) and is_int(rhs):
        return lhs + rhs
    if (is_str(lhs) or is_int(lhs)) and (is_str(rhs) or is_int(rhs)):
        return display(lhs) + display(rhs)
    raise RinhaTypeError("Cannot perform add operation", location)

def sub(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    if is_int(lhs) and is_int(rhs):
        return lhs - rhs
    raise RinhaTypeError("Cannot perform sub operation", location)

def mul(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    if is_int(lhs) and is_int(rhs):
        return lhs * rhs
    raise RinhaTypeError("Cannot perform mul operation", location)

def _truncated_div(lhs: int, rhs: int) -> int:
    # Rounds toward zero, unlike Python's floor division.
    quotient = abs(lhs) // rhs
    return -quotient if lhs < 0 else quotient

def div(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    if not (is_int(lhs) and is_int(rhs)):
        raise RinhaTypeError("Cannot perform div operation", location)
    if rhs <= 0:
        raise RinhaArithmeticError("Arithmetic error, dividing by zero", location)
    return _truncated_div(lhs, rhs)

def rem(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    if not (is_int(lhs) and is_int(rhs)):
        raise RinhaTypeError("Cannot perform rem operation", location)
    if rhs <= 0:
        raise RinhaArithmeticError("Arithmetic error, dividing by zero", location)
    # Takes the sign of the dividend.
    return lhs - rhs * _truncated_div(lhs, rhs)

# -------------------------------
# Equality and ordering
# -------------------------------
def eq(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> bool:
    return values_equal(lhs, rhs)

def neq(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> bool:
    return not values_equal(lhs, rhs)

def _comparison(name: str, compare: Callable[[RinhaValue, RinhaValue], bool]) -> BinaryOperator:
    def op(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> bool:
        if (is_int(lhs) and is_int(rhs)) or (is_str(lhs) and is_str(rhs)):
            return compare(lhs, rhs)
        raise RinhaTypeError(f"Cannot perform {name} operation", location)
    op.__name__ = name
    return op

lt = _comparison("lt", lambda a, b: a < b)
gt = _comparison("gt", lambda a, b: a > b)
lte = _comparison("lte", lambda a, b: a <= b)
gte = _comparison("gte", lambda a, b: a >= b)

# -------------------------------
# Boolean combinators
# -------------------------------
def and_(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    """`false` wins; anything else yields rhs as-is (not coerced to bool)."""
    if lhs is False:
        return False
    return rhs

def or_(lhs: RinhaValue, rhs: RinhaValue, location: Location) -> RinhaValue:
    """`true` wins; anything else yields rhs as-is (not coerced to bool)."""
    if lhs is True:
        return True
    return rhs


BINARY_OPERATORS: dict[BinaryOp, BinaryOperator] = {
    BinaryOp.Add: add,
    BinaryOp.Sub: sub,
    BinaryOp.Mul: mul,
    BinaryOp.Div: div,
    BinaryOp.Rem: rem,
    BinaryOp.Eq: eq,
    BinaryOp.Neq: neq,
    BinaryOp.Lt: lt,
    BinaryOp.Gt: gt,
    BinaryOp.Lte: lte,
    BinaryOp.Gte: gte,
    BinaryOp.And: and_,
    BinaryOp.Or: or_,
}
