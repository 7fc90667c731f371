"""
Integer helpers for the Fraction type.

Python ints are arbitrary precision, so these never overflow. They cover the
few operations the value type needs beyond the built-in arithmetic operators.
"""

from __future__ import annotations


def sign(a: int) -> int:
    """Return -1, 0 or 1 according to the sign of a."""
    if a > 0:
        return 1
    if a < 0:
        return -1
    return 0


def gcd(a: int, b: int) -> int:
    """
    Greatest Common Divisor.

    Always non-negative. gcd(0, 0) is 0.
    """
    a, b = abs(a), abs(b)
    if a < b:
        a, b = b, a
    if b == 0:
        return a
    r = a % b
    while r != 0:
        a, b = b, r
        r = a % b
    return b


def lcm(a: int, b: int) -> int:
    """
    Least Common Multiple.

    Always non-negative; zero if either argument is zero.
    """
    if a == 0 or b == 0:
        return 0
    return abs(a // gcd(a, b) * b)


def reduce_fraction(num: int, den: int) -> tuple[int, int]:
    """
    Reduce fraction to lowest terms.

    Ensures denominator is non-negative. The pair (0, 0) is returned
    unchanged; any other zero numerator reduces to (0, 1).
    """
    if den < 0:
        num, den = -num, -den
    g = gcd(num, den)
    if g == 0:
        return (0, 0)
    return (num // g, den // g)
