import torch

from ._checked import promote
from ._polynomial import Polynomial


def polynomial_equal(p: Polynomial, q: Polynomial) -> bool:
    """Check whether two polynomials have the same coefficients.

    Parameters
    ----------
    p, q : Polynomial
        Polynomials to compare. Dtypes may differ; values are compared
        after promotion to the common dtype.

    Returns
    -------
    bool
        True if the canonical coefficient sequences are identical.
    """
    p_coeffs, q_coeffs = promote(p.coeffs, q.coeffs)
    return torch.equal(p_coeffs, q_coeffs)
