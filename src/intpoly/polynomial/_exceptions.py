"""Exception hierarchy for polynomial operations."""

from intpoly.polynomial._coefficient_overflow_error import (
    CoefficientOverflowError,
)
from intpoly.polynomial._invalid_argument_error import InvalidArgumentError
from intpoly.polynomial._polynomial_error import PolynomialError

__all__ = [
    "CoefficientOverflowError",
    "InvalidArgumentError",
    "PolynomialError",
]
