import torch

from ._checked import (
    OverflowPolicy,
    check_overflow_policy,
    checked_add,
    promote,
    report_overflow,
)
from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_trim import _from_coefficients


def polynomial_add(
    p: Polynomial,
    q: Polynomial,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Add two polynomials.

    Sums the coefficients both polynomials have in common and copies the
    remaining higher-degree coefficients of the longer one, so the work is
    O(max degree) without padding the shorter operand.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to add. Either may be the zero polynomial.
    overflow : {"raise", "wrap"}
        What to do when a coefficient sum leaves the dtype's range.

    Returns
    -------
    Polynomial
        Canonical sum p + q, in the promoted dtype of p and q.

    Raises
    ------
    CoefficientOverflowError
        If a coefficient overflows and ``overflow="raise"``.
    """
    check_overflow_policy(overflow)

    p_coeffs, q_coeffs = promote(p.coeffs, q.coeffs)

    if polynomial_degree(p) < polynomial_degree(q):
        lo, hi = p_coeffs, q_coeffs
    else:
        lo, hi = q_coeffs, p_coeffs

    n_lo = lo.shape[-1]

    common, overflowed = checked_add(lo, hi[:n_lo])
    report_overflow(overflowed, "polynomial_add", overflow)

    return _from_coefficients(torch.cat([common, hi[n_lo:]]))
