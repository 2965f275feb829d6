"""Tests for polynomial exception hierarchy."""

import pytest

from intpoly.polynomial import (
    CoefficientOverflowError,
    InvalidArgumentError,
    PolynomialError,
)


class TestExceptionHierarchy:
    """Test that all exceptions inherit from PolynomialError."""

    def test_invalid_argument_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise InvalidArgumentError("test")

    def test_coefficient_overflow_error_is_polynomial_error(self):
        with pytest.raises(PolynomialError):
            raise CoefficientOverflowError("test")

    def test_invalid_argument_error_is_value_error(self):
        with pytest.raises(ValueError):
            raise InvalidArgumentError("test")

    def test_coefficient_overflow_error_is_overflow_error(self):
        with pytest.raises(OverflowError):
            raise CoefficientOverflowError("test")


class TestExceptionMessages:
    """Test that exceptions preserve their messages."""

    def test_invalid_argument_error_message(self):
        with pytest.raises(InvalidArgumentError, match="cannot be less"):
            raise InvalidArgumentError(
                "Degree of polynomial cannot be less than 0"
            )

    def test_coefficient_overflow_error_message(self):
        with pytest.raises(CoefficientOverflowError, match="overflowed"):
            raise CoefficientOverflowError("polynomial_add: 1 overflowed")
