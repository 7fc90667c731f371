"""
Library exceptions.

Arithmetic never raises for a zero denominator; these exceptions only
report caller contract violations such as passing a non-numeric operand.
"""

from typing import Any, Dict, Optional


class FractionError(Exception):
    """Base exception for exactfrac errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class OperandTypeError(FractionError, TypeError):
    """Raised when an operation receives an operand it cannot use"""

    def __init__(self, operation: str, operand: Any, expected: str = "Fraction or int"):
        super().__init__(
            message=(
                f"{operation}() expects a {expected} operand, "
                f"got {type(operand).__name__}"
            ),
            details={
                "operation": operation,
                "operand_type": type(operand).__name__,
                "expected": expected,
            },
        )
