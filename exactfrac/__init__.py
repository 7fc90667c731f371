"""
exactfrac - exact rational arithmetic

Immutable fractions of arbitrary-precision integers with:
- Sign and zero-denominator normalization
- Exact arithmetic (no rounding, ever)
- Value-based equality and ordering
- Canonical string output
"""

from .core.errors import FractionError, OperandTypeError
from .fraction import Fraction, sum_all
from .integers import gcd, lcm, reduce_fraction
from .value import RationalValue

__all__ = [
    "Fraction",
    "sum_all",
    "RationalValue",
    "gcd",
    "lcm",
    "reduce_fraction",
    "FractionError",
    "OperandTypeError",
]
