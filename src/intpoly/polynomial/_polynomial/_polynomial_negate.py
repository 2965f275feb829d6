from ._checked import OverflowPolicy
from ._polynomial import Polynomial
from ._polynomial_scale import polynomial_scale


def polynomial_negate(
    p: Polynomial,
    *,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Negate polynomial.

    Parameters
    ----------
    p : Polynomial
        Polynomial to negate.
    overflow : {"raise", "wrap"}
        Negating the dtype's minimum value overflows.

    Returns
    -------
    Polynomial
        Negated polynomial -p.
    """
    return polynomial_scale(p, -1, overflow=overflow)
