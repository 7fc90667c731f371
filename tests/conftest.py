"""
Shared pytest fixtures and utilities for testing exactfrac.

This module provides:
- Fixtures for asserting Pydantic validation failures
- Helpers for comparing fractions by their stored pair
- A fixture that resets package logging between tests
"""

import logging
from typing import Any, Type

import pytest
from pydantic import BaseModel, ValidationError

from exactfrac import Fraction
from exactfrac.core.config import get_settings


@pytest.fixture
def assert_validation_error():
    """Helper to assert that a ValidationError is raised with expected details."""
    def _assert_validation(
        model_class: Type[BaseModel],
        *args: Any,
        expected_field: str | None = None,
        expected_type: str | None = None,
    ) -> ValidationError:
        """
        Assert that creating a model raises ValidationError.

        Args:
            model_class: The Pydantic model class
            *args: Invalid positional arguments for the model
            expected_field: Expected field name in error (optional)
            expected_type: Expected error type (optional)

        Returns:
            The ValidationError that was raised
        """
        with pytest.raises(ValidationError) as exc_info:
            model_class(*args)

        error = exc_info.value
        if expected_field:
            field_errors = [e for e in error.errors() if e['loc'] and e['loc'][0] == expected_field]
            assert len(field_errors) > 0, f"Expected error for field '{expected_field}' not found"

        if expected_type:
            assert any(
                expected_type in str(e['type']).lower() for e in error.errors()
            ), f"Expected error type containing '{expected_type}' not found"

        return error

    return _assert_validation


@pytest.fixture
def assert_stored_pair():
    """Helper to assert the exact (numerator, denominator) a Fraction stores."""
    def _assert_pair(fraction: Fraction, numerator: int, denominator: int) -> None:
        assert (fraction.numerator, fraction.denominator) == (numerator, denominator), (
            f"Expected stored pair ({numerator}, {denominator}), got {fraction!r}"
        )
    return _assert_pair


@pytest.fixture
def clean_package_logging():
    """Restore the exactfrac logger and cached settings after a test."""
    package_logger = logging.getLogger("exactfrac")
    saved = (list(package_logger.handlers), package_logger.level, package_logger.propagate)
    get_settings.cache_clear()
    yield package_logger
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    handlers, level, propagate = saved
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = propagate
    get_settings.cache_clear()


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
