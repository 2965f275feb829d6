import torch

from ._checked import (
    OverflowPolicy,
    check_overflow_policy,
    checked_multiply,
    report_overflow,
)
from ._polynomial import Polynomial, _check_integer
from ._polynomial_trim import _from_coefficients


def polynomial_scale(
    p: Polynomial,
    c: int,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Multiply polynomial by an integer scalar.

    Parameters
    ----------
    p : Polynomial
        Polynomial to scale.
    c : int
        Scalar. Zero gives the zero polynomial.
    overflow : {"raise", "wrap"}
        What to do when a scaled coefficient leaves the dtype's range.

    Returns
    -------
    Polynomial
        Canonical scaled polynomial c * p.

    Raises
    ------
    InvalidArgumentError
        If c is not an integer.
    CoefficientOverflowError
        If c does not fit the dtype of p, or if a coefficient overflows and
        ``overflow="raise"``.
    """
    check_overflow_policy(overflow)

    coeffs = p.coeffs
    c = torch.tensor(_check_integer(c, coeffs.dtype), dtype=coeffs.dtype)

    result, overflowed = checked_multiply(coeffs, c)
    report_overflow(overflowed, "polynomial_scale", overflow)

    # c == 0 leaves all-zero coefficients; trimming makes them empty.
    return _from_coefficients(result)
