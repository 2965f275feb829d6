import torch

from ._checked import (
    OverflowPolicy,
    check_overflow_policy,
    checked_multiply,
    report_overflow,
)
from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_trim import _from_coefficients


def polynomial_derivative(
    p: Polynomial,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Compute derivative of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.
    overflow : {"raise", "wrap"}
        What to do when ``k * coeffs[k]`` leaves the dtype's range.

    Returns
    -------
    Polynomial
        Canonical derivative dp/dx. Constants and the zero polynomial give
        the zero polynomial.

    Examples
    --------
    >>> p = polynomial([2, 5, 3])  # 2 + 5x + 3x^2
    >>> polynomial_derivative(p).coeffs  # 5 + 6x
    tensor([5, 6])
    """
    check_overflow_policy(overflow)

    coeffs = p.coeffs
    degree = polynomial_degree(p)

    if degree < 1:
        # Derivative of constant is zero
        return Polynomial.zero(dtype=coeffs.dtype)

    # d/dx (a_0 + a_1*x + a_2*x^2 + ... + a_n*x^n)
    # = a_1 + 2*a_2*x + 3*a_3*x^2 + ... + n*a_n*x^(n-1)
    # new_coeffs[k - 1] = k * old_coeffs[k]
    exponents = torch.arange(1, degree + 1, dtype=torch.int64)

    # Exponents the dtype cannot hold overflow for any non-zero coefficient.
    unrepresentable = (exponents > torch.iinfo(coeffs.dtype).max) & (
        coeffs[1:] != 0
    )

    result, overflowed = checked_multiply(
        coeffs[1:], exponents.to(coeffs.dtype)
    )
    report_overflow(
        overflowed | unrepresentable, "polynomial_derivative", overflow
    )

    return _from_coefficients(result)
