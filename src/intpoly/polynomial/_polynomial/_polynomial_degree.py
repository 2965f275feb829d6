from ._polynomial import Polynomial


def polynomial_degree(p: Polynomial) -> int:
    """Return degree of polynomial.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    int
        Number of coefficients minus 1, so -1 for the zero polynomial.

    Notes
    -----
    This is the formal degree of the stored coefficients. Polynomials built
    by this package are canonical, so it is also the actual degree.
    """
    return p.coeffs.shape[-1] - 1
