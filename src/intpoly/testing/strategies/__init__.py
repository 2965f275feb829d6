"""Hypothesis strategies for polynomial testing."""

from ._coefficients import coefficients
from ._integer_dtypes import integer_dtypes
from ._nonzero_polynomials import nonzero_polynomials
from ._polynomials import polynomials

__all__ = [
    # Numeric strategies
    "coefficients",
    # Polynomial strategies
    "polynomials",
    "nonzero_polynomials",
    # Dtype strategies
    "integer_dtypes",
]
