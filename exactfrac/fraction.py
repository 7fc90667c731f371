"""
Fraction type.

Implements an immutable Fraction that stores numerator and denominator as
Python ints, so values are exact at any size.

Normalization rules applied on every construction:
- the denominator is never negative (both terms are negated together)
- a zero denominator collapses the pair to (0, 0), the canonical zero

Fractions are not reduced to lowest terms; equality and ordering compare
values by cross-multiplication, and reduction only happens when rendering.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from .core.errors import OperandTypeError
from .core.logging import get_context_logger
from .integers import reduce_fraction, sign
from .value import RationalValue

logger = get_context_logger(__name__, value_type="Fraction")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Fraction(BaseModel, RationalValue):
    """
    Fraction represents a rational number as numerator/denominator.

    Examples:
        >>> Fraction(1, 2)    # 1/2
        >>> Fraction(6, -8)   # stored as -6/8, prints "-3 / 4"
        >>> Fraction(4, 0)    # canonical zero, stored as 0/0
    """

    model_config = ConfigDict(frozen=True)

    numerator: StrictInt = Field(description="The numerator")
    denominator: StrictInt = Field(default=1, description="The denominator, never negative")

    def __init__(self, numerator: int, denominator: int = 1, **kwargs):
        """
        Create a Fraction.

        Args:
            numerator: Numerator (or the whole value if denominator is 1)
            denominator: Denominator (default 1); zero gives the canonical zero
        """
        super().__init__(numerator=numerator, denominator=denominator, **kwargs)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        """Apply the sign and zero-denominator rules to a raw pair."""
        if not isinstance(data, dict):
            return data
        num = data.get("numerator")
        den = data.get("denominator", 1)
        if not (_is_int(num) and _is_int(den)):
            # Let field validation report the bad type
            return data
        if den == 0:
            if num != 0:
                logger.debug(
                    "Zero denominator, collapsing to canonical zero",
                    extra_data={"numerator": num},
                )
            return {**data, "numerator": 0, "denominator": 0}
        if den < 0:
            return {**data, "numerator": -num, "denominator": -den}
        return data

    # Constructors

    @classmethod
    def from_integer(cls, value: int) -> Fraction:
        """Return the Fraction value/1."""
        return cls(value)

    @classmethod
    def from_ratio(cls, numerator: int, denominator: int) -> Fraction:
        """Return numerator/denominator, normalized. Never raises for a zero denominator."""
        return cls(numerator, denominator)

    # Helpers

    def _terms(self) -> tuple[int, int]:
        """Numerator and denominator as used by arithmetic; the zero pair counts as 0/1."""
        if self.denominator == 0:
            return (0, 1)
        return (self.numerator, self.denominator)

    def _coerce(self, val: Any, operation: str) -> Fraction:
        if isinstance(val, Fraction):
            return val
        if _is_int(val):
            return Fraction(val)
        raise OperandTypeError(operation, val)

    def is_zero(self) -> bool:
        return self.numerator == 0

    def is_integer(self) -> bool:
        """True if the value is a whole number (zero included)."""
        return self.is_zero() or reduce_fraction(self.numerator, self.denominator)[1] == 1

    def reduce(self) -> Fraction:
        """
        Reduce fraction to lowest terms.

        Returns new reduced Fraction. The canonical zero pair stays (0, 0).
        """
        return Fraction(*reduce_fraction(self.numerator, self.denominator))

    def is_reduced(self) -> bool:
        """Check if fraction is in lowest terms."""
        return reduce_fraction(self.numerator, self.denominator) == (
            self.numerator,
            self.denominator,
        )

    # Arithmetic

    def add(self, val: Fraction | int) -> Fraction:
        """
        Return self + val.

        a/b + c/d = (a*d + b*c)/(b*d)
        """
        other = self._coerce(val, "add")
        a, b = self._terms()
        c, d = other._terms()
        return Fraction(a * d + b * c, b * d)

    def subtract(self, val: Fraction | int) -> Fraction:
        """
        Return self - val.

        a/b - c/d = (a*d - b*c)/(b*d)
        """
        other = self._coerce(val, "subtract")
        a, b = self._terms()
        c, d = other._terms()
        return Fraction(a * d - b * c, b * d)

    def multiply(self, val: Fraction | int) -> Fraction:
        """
        Return self * val.

        (a/b) * (c/d) = (a*c)/(b*d)
        """
        other = self._coerce(val, "multiply")
        a, b = self._terms()
        c, d = other._terms()
        return Fraction(a * c, b * d)

    def divide(self, val: Fraction | int) -> Fraction:
        """
        Return self / val.

        (a/b) / (c/d) = (a*d)/(b*c). Dividing by a zero value gives the
        canonical zero instead of raising.
        """
        other = self._coerce(val, "divide")
        a, b = self._terms()
        c, d = other._terms()
        return Fraction(a * d, b * c)

    def negate(self) -> Fraction:
        """Return -self; only the numerator changes sign."""
        return Fraction(-self.numerator, self.denominator)

    def invert(self) -> Fraction:
        """Return 1 / self. Inverting zero gives the canonical zero."""
        return Fraction(self.denominator, self.numerator)

    def pow(self, exponent: int) -> Fraction:
        """
        Return self ** exponent.

        a**0 is 1 for every a, zero included. Negative exponents raise the
        inverse to the matching positive power.
        """
        if not _is_int(exponent):
            raise OperandTypeError("pow", exponent, expected="int")
        if exponent == 0:
            return Fraction(1)
        if exponent < 0:
            return self.invert().pow(-exponent)
        a, b = self._terms()
        return Fraction(a ** exponent, b ** exponent)

    # Comparison

    def compare_to(self, val: Fraction | int) -> int:
        """
        Compare this Fraction with val.

        Returns:
            -1, 0 or 1 as self is numerically less than, equal to, or
            greater than val
        """
        other = self._coerce(val, "compare_to")
        a, b = self._terms()
        c, d = other._terms()
        return sign(a * d - c * b)

    def is_equal_to(self, val: Any) -> bool:
        """True if val represents the same value; False for None or non-numbers."""
        if not self._supports(val):
            return False
        return self.compare_to(val) == 0

    def signum(self) -> int:
        """Return 1, 0 or -1; denominators are never negative, so the numerator decides."""
        return sign(self.numerator)

    def abs(self) -> Fraction:
        """Return |self|."""
        return Fraction(abs(self.numerator), abs(self.denominator))

    def max(self, val: Fraction | int) -> Fraction:
        """Return the larger of self and val (self on ties)."""
        other = self._coerce(val, "max")
        return other if self.compare_to(other) < 0 else self

    def min(self, val: Fraction | int) -> Fraction:
        """Return the smaller of self and val (self on ties)."""
        other = self._coerce(val, "min")
        return other if self.compare_to(other) > 0 else self

    def __abs__(self) -> Fraction:
        """Absolute value: abs(self)."""
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        """Value equality, so Fraction(1, 2) == Fraction(2, 4)."""
        return self.is_equal_to(other)

    def __hash__(self) -> int:
        num, den = reduce_fraction(*self._terms())
        if den == 1:
            return hash(num)
        return hash((num, den))

    # Summation

    @classmethod
    def sum_all(cls, fractions: Optional[Iterable[Optional[Fraction]]]) -> Optional[Fraction]:
        """Sum of all fractions; None if fractions is or contains None."""
        return sum_all(fractions)

    # String representations

    def to_string(self) -> str:
        """
        Convert to the canonical string representation.

        Zero values render as "0", whole numbers as the bare integer and
        everything else as "n / d" in lowest terms with the sign on n.
        """
        if self.is_zero():
            return "0"
        num, den = reduce_fraction(self.numerator, self.denominator)
        if den == 1:
            return str(num)
        return f"{num} / {den}"

    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        if self.is_zero():
            return "0"
        num, den = reduce_fraction(self.numerator, self.denominator)
        if den == 1:
            return str(num)
        return f"\\frac{{{num}}}{{{den}}}"

    def __str__(self) -> str:
        """String representation for display - returns fraction notation."""
        return self.to_string()

    def __repr__(self) -> str:
        """Developer representation showing the stored pair."""
        return f"Fraction({self.numerator}, {self.denominator})"


def sum_all(fractions: Optional[Iterable[Optional[Fraction]]]) -> Optional[Fraction]:
    """
    Return the sum of all elements of fractions.

    Args:
        fractions: Fractions (or ints) to be summed up; may be or contain None

    Returns:
        None if fractions is or contains None; the sum otherwise. An empty
        iterable sums to zero.
    """
    if fractions is None:
        logger.debug("sum_all called with None")
        return None
    items = list(fractions)
    if any(item is None for item in items):
        logger.debug(
            "sum_all input contains None",
            extra_data={"count": len(items)},
        )
        return None
    total = Fraction(0)
    for item in items:
        total = total.add(item)
    return total
