"""
Base RationalValue class for exact rational values.

This module declares the operation set shared by rational value types:
- Named arithmetic methods and their Python operators
- Exact ordering by cross-multiplication
- Canonical string and TeX output

Concrete subclasses should inherit from both BaseModel and RationalValue,
e.g., `class Fraction(BaseModel, RationalValue):`. RationalValue itself is
abstract and does not inherit from BaseModel to avoid MRO conflicts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class RationalValue(ABC):
    """
    Base class for immutable rational values.

    Every operation returns a new value; nothing mutates an existing one.
    """

    # Arithmetic

    @abstractmethod
    def add(self, val: Any) -> RationalValue:
        """Return self + val."""

    @abstractmethod
    def subtract(self, val: Any) -> RationalValue:
        """Return self - val."""

    @abstractmethod
    def multiply(self, val: Any) -> RationalValue:
        """Return self * val."""

    @abstractmethod
    def divide(self, val: Any) -> RationalValue:
        """Return self / val."""

    @abstractmethod
    def negate(self) -> RationalValue:
        """Return -self."""

    @abstractmethod
    def invert(self) -> RationalValue:
        """Return 1 / self."""

    @abstractmethod
    def pow(self, exponent: int) -> RationalValue:
        """Return self ** exponent."""

    # Comparison

    @abstractmethod
    def compare_to(self, val: Any) -> int:
        """Return -1, 0 or 1 as self is less than, equal to or greater than val."""

    @abstractmethod
    def signum(self) -> int:
        """Return -1, 0 or 1 according to the sign of self."""

    @abstractmethod
    def is_equal_to(self, val: Any) -> bool:
        """Check whether self and val represent the same value."""

    @abstractmethod
    def abs(self) -> RationalValue:
        """Return the absolute value of self."""

    @abstractmethod
    def max(self, val: Any) -> RationalValue:
        """Return the larger of self and val."""

    @abstractmethod
    def min(self, val: Any) -> RationalValue:
        """Return the smaller of self and val."""

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to the canonical string form."""

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""

    def __str__(self) -> str:
        """String representation (uses to_string)."""
        return self.to_string()

    # Operator overloading (Python magic methods)

    def __add__(self, other: Any) -> Any:
        """Addition: self + other"""
        if not self._supports(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Any:
        """Right addition: other + self"""
        if not self._supports(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Any:
        """Subtraction: self - other"""
        if not self._supports(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Any:
        """Right subtraction: other - self"""
        if not self._supports(other):
            return NotImplemented
        return self.negate().add(other)

    def __mul__(self, other: Any) -> Any:
        """Multiplication: self * other"""
        if not self._supports(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Any:
        """Right multiplication: other * self"""
        if not self._supports(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: Any) -> Any:
        """Division: self / other"""
        if not self._supports(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> Any:
        """Right division: other / self"""
        if not self._supports(other):
            return NotImplemented
        return self.invert().multiply(other)

    def __pow__(self, other: Any) -> Any:
        """Exponentiation: self ** other (integer exponents only)"""
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.pow(other)

    def __neg__(self) -> RationalValue:
        """Unary negation: -self"""
        return self.negate()

    def __pos__(self) -> RationalValue:
        """Unary positive: +self"""
        return self

    def __bool__(self) -> bool:
        return self.signum() != 0

    # Ordering

    def __lt__(self, other: Any) -> bool:
        if not self._supports(other):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: Any) -> bool:
        if not self._supports(other):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: Any) -> bool:
        if not self._supports(other):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: Any) -> bool:
        if not self._supports(other):
            return NotImplemented
        return self.compare_to(other) >= 0

    @classmethod
    def _supports(cls, other: Any) -> bool:
        """Whether other can take part in arithmetic with this type."""
        if isinstance(other, bool):
            return False
        return isinstance(other, (cls, int))
