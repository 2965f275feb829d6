import torch

from ._checked import (
    OverflowPolicy,
    add_with_carry,
    check_overflow_policy,
    checked_multiply,
    promote,
    report_overflow,
)
from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree
from ._polynomial_trim import _from_coefficients


def polynomial_multiply(
    p: Polynomial,
    q: Polynomial,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Multiply two polynomials.

    Computes convolution of coefficients. Result degree is deg(p) + deg(q)
    for non-zero operands, and the zero polynomial otherwise.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to multiply.
    overflow : {"raise", "wrap"}
        What to do when a product or a partial sum leaves the dtype's range.

    Returns
    -------
    Polynomial
        Canonical product p * q.

    Notes
    -----
    Direct O(deg(p) * deg(q)) convolution: one row of products per
    coefficient of the lower-degree operand, accumulated into the result.
    Partial sums may wrap; only result coefficients whose net wrap count is
    non-zero, or that received a term product which itself overflowed,
    are reported. The outcome does not depend on operand order.
    """
    check_overflow_policy(overflow)

    p_coeffs, q_coeffs = promote(p.coeffs, q.coeffs)

    # Handle zero polynomials (degree -1)
    if p_coeffs.shape[-1] == 0 or q_coeffs.shape[-1] == 0:
        return Polynomial.zero(dtype=p_coeffs.dtype)

    if polynomial_degree(p) < polynomial_degree(q):
        lo, hi = p_coeffs, q_coeffs
    else:
        lo, hi = q_coeffs, p_coeffs

    n_lo = lo.shape[-1]
    n_hi = hi.shape[-1]

    n_out = n_lo + n_hi - 1
    result = torch.zeros(n_out, dtype=p_coeffs.dtype)
    carries = torch.zeros(n_out, dtype=torch.int64)
    product_overflowed = torch.zeros(n_out, dtype=torch.bool)

    for i in range(n_lo):
        if lo[i] == 0:
            continue

        row, row_overflowed = checked_multiply(lo[i], hi)
        window, window_carry = add_with_carry(result[i : i + n_hi], row)
        result[i : i + n_hi] = window
        carries[i : i + n_hi] += window_carry
        product_overflowed[i : i + n_hi] |= row_overflowed

    report_overflow(
        product_overflowed | (carries != 0), "polynomial_multiply", overflow
    )

    return _from_coefficients(result)
