"""Integer-coefficient polynomials in one variable.

Polynomials are stored as 1-D fixed-width integer tensors in ascending
order and kept canonical: no trailing zero coefficients, and the zero
polynomial has no coefficients at all (degree -1).

Arithmetic on coefficients follows the tensor dtype's two's-complement
range. Every arithmetic operation accepts ``overflow="raise"`` (default,
raises CoefficientOverflowError) or ``overflow="wrap"`` (keeps the
wrapped values and warns).
"""

from ._exceptions import (
    CoefficientOverflowError,
    InvalidArgumentError,
    PolynomialError,
)
from ._polynomial import (
    ZERO_POLYNOMIAL_STRING,
    Polynomial,
    polynomial,
    polynomial_add,
    polynomial_coefficients,
    polynomial_degree,
    polynomial_derivative,
    polynomial_equal,
    polynomial_from_term,
    polynomial_multiply,
    polynomial_negate,
    polynomial_print,
    polynomial_random,
    polynomial_scale,
    polynomial_subtract,
    polynomial_to_string,
    polynomial_trim,
)

__all__ = [
    # Exceptions
    "CoefficientOverflowError",
    "InvalidArgumentError",
    "PolynomialError",
    # Power basis
    "Polynomial",
    "ZERO_POLYNOMIAL_STRING",
    "polynomial",
    "polynomial_add",
    "polynomial_coefficients",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_equal",
    "polynomial_from_term",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_print",
    "polynomial_random",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_to_string",
    "polynomial_trim",
]
