import torch

from ._checked import OverflowPolicy
from ._polynomial import Polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_scale import polynomial_scale
from ._polynomial_trim import _from_coefficients


def polynomial_subtract(
    p: Polynomial,
    q: Polynomial,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Subtract two polynomials.

    Computed as ``p + (-1) * q``, with q first cast to the common dtype of
    p and q so the negation happens at the result's width.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to subtract.
    overflow : {"raise", "wrap"}
        Overflow policy for both the negation and the addition.

    Returns
    -------
    Polynomial
        Canonical difference p - q.
    """
    common_dtype = torch.promote_types(p.coeffs.dtype, q.coeffs.dtype)
    q = _from_coefficients(q.coeffs.to(common_dtype))

    return polynomial_add(
        p,
        polynomial_scale(q, -1, overflow=overflow),
        overflow=overflow,
    )
