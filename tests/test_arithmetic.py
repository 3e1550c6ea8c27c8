import pytest

from rinha.errors import RinhaArithmeticError, RinhaTypeError
from ast_builders import binary, boolean, integer, loc, string, tup


def lit(value):
    if isinstance(value, bool):
        return boolean(value)
    if isinstance(value, int):
        return integer(value)
    return string(value)


@pytest.mark.parametrize(
    "lhs,op,rhs,expected",
    [
        (1, "Add", 2, 3),
        ("abc", "Add", 1, "abc1"),
        (1, "Add", "abc", "1abc"),
        ("abc", "Add", "def", "abcdef"),
        (10, "Sub", 2, 8),
        (2, "Mul", 2, 4),
        (10, "Div", 2, 5),
        (10, "Div", 3, 3),
        (-7, "Div", 2, -3),      # rounds toward zero
        (4, "Rem", 2, 0),
        (7, "Rem", 3, 1),
        (-7, "Rem", 2, -1),      # sign of the dividend
        (1, "Eq", 1, True),
        (1, "Eq", 2, False),
        ("a", "Eq", "a", True),
        (1, "Eq", "1", False),
        (True, "Eq", 1, False),
        (1, "Neq", 2, True),
        (1, "Neq", 1, False),
        (2, "Gt", 1, True),
        ("b", "Gt", "a", True),
        (1, "Lt", 2, True),
        ("a", "Lt", "b", True),
        (2, "Gte", 2, True),
        (1, "Lte", 0, False),
        (False, "And", 5, False),
        (True, "And", 5, 5),
        (1, "And", 5, 5),
        (True, "Or", 5, True),
        (False, "Or", 5, 5),
        ("x", "Or", False, False),
    ],
)
def test_binary_operations(run, lhs, op, rhs, expected):
    result = run(binary(lit(lhs), op, lit(rhs)))
    assert type(result) is type(expected)
    assert result == expected


def test_arithmetic_is_unbounded(run):
    big = 2 ** 31 - 1
    result = run(binary(binary(integer(big), "Mul", integer(big)), "Mul", integer(big)))
    assert result == big ** 3


@pytest.mark.parametrize(
    "lhs,op,rhs,message",
    [
        ("a", "Add", True, "Cannot perform add operation"),
        (True, "Add", 1, "Cannot perform add operation"),
        ("a", "Sub", 1, "Cannot perform sub operation"),
        (1, "Mul", "b", "Cannot perform mul operation"),
        ("a", "Div", 1, "Cannot perform div operation"),
        (1, "Rem", True, "Cannot perform rem operation"),
        (1, "Gt", "a", "Cannot perform gt operation"),
        (True, "Gt", False, "Cannot perform gt operation"),
        (1, "Lt", "a", "Cannot perform lt operation"),
        (1, "Gte", "a", "Cannot perform gte operation"),
        (1, "Lte", "a", "Cannot perform lte operation"),
    ],
)
def test_operand_type_errors(run, lhs, op, rhs, message):
    where = loc(3, 11)
    with pytest.raises(RinhaTypeError) as exc:
        run(binary(lit(lhs), op, lit(rhs), location=where))
    assert exc.value.message == message
    assert exc.value.location == where


@pytest.mark.parametrize("op", ["Div", "Rem"])
@pytest.mark.parametrize("divisor", [0, -1, -10])
def test_non_positive_divisor_is_an_arithmetic_error(run, op, divisor):
    with pytest.raises(RinhaArithmeticError, match="Arithmetic error, dividing by zero"):
        run(binary(integer(10), op, integer(divisor)))


def test_tuples_compare_structurally(run):
    assert run(binary(tup(integer(1), string("a")), "Eq", tup(integer(1), string("a")))) is True
    assert run(binary(tup(integer(1), string("a")), "Neq", tup(integer(1), string("b")))) is True
    with pytest.raises(RinhaTypeError, match="Cannot perform add operation"):
        run(binary(tup(integer(1), integer(2)), "Add", integer(1)))
