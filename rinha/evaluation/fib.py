"""Native Fibonacci used by the `fib(n)` call fast path.

Below the threshold a linear pair walk is cheapest; above it, 2x2 matrix
exponentiation by squaring does O(log n) big-int multiplications instead of
O(n) additions. Both return F(n) with F(0) = 0, F(1) = 1; `fib` yields 0 for
negative n.
"""

from __future__ import annotations

Matrix2x2 = tuple[tuple[int, int], tuple[int, int]]

FIB_MATRIX: Matrix2x2 = ((1, 1), (1, 0))
IDENTITY: Matrix2x2 = ((1, 0), (0, 1))


def matrix_mul(a: Matrix2x2, b: Matrix2x2) -> Matrix2x2:
    x00 = a[0][0] * b[0][0] + a[0][1] * b[1][0]
    x01 = a[0][0] * b[0][1] + a[0][1] * b[1][1]
    x10 = a[1][0] * b[0][0] + a[1][1] * b[1][0]
    x11 = a[1][0] * b[0][1] + a[1][1] * b[1][1]
    return ((x00, x01), (x10, x11))


def matrix_pow(matrix: Matrix2x2, nth: int) -> Matrix2x2:
    """Raise `matrix` to the `nth` power (nth >= 0) by repeated squaring."""
    if nth == 0:
        return IDENTITY
    if nth == 1:
        return matrix
    if nth % 2 == 0:
        half = matrix_pow(matrix, nth // 2)
        return matrix_mul(half, half)
    return matrix_mul(matrix, matrix_pow(matrix, nth - 1))


def fib_matrix(nth: int) -> int:
    return matrix_pow(FIB_MATRIX, nth)[1][0]


def fib_iter(nth: int) -> int:
    a, b = 0, 1
    for _ in range(nth):
        a, b = b, a + b
    return a


def fib(nth: int, threshold: int = 1000) -> int:
    # Same answer the pair walk gives: zero steps taken.
    if nth < 0:
        return 0
    if nth < threshold:
        return fib_iter(nth)
    return fib_matrix(nth)
