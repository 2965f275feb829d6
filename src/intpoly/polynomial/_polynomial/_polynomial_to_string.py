from intpoly.polynomial._invalid_argument_error import InvalidArgumentError

from ._polynomial import Polynomial
from ._polynomial_degree import polynomial_degree

ZERO_POLYNOMIAL_STRING = "0 polynomial"


def polynomial_to_string(p: Polynomial) -> str:
    """Render polynomial as text.

    Terms are written from the highest degree down, skipping zero
    coefficients. Positive coefficients carry an explicit ``+`` (the leading
    term included), negative ones their ``-``. Degree 0 is the bare
    coefficient, degree 1 is ``<c>x`` and higher degrees are ``<c>x^<k>``.

    Parameters
    ----------
    p : Polynomial
        Polynomial to render.

    Returns
    -------
    str
        Rendered polynomial, or ``"0 polynomial"`` for the zero polynomial.

    Examples
    --------
    >>> polynomial_to_string(polynomial([2, 5, 3]))
    '+3x^2+5x+2'
    >>> polynomial_to_string(polynomial([0, -1, 0, 4]))
    '+4x^3-1x'
    """
    degree = polynomial_degree(p)
    if degree == -1:
        return ZERO_POLYNOMIAL_STRING

    coeffs = p.coeffs.tolist()

    return "".join(
        _term_to_string(coeffs[k], k)
        for k in range(degree, -1, -1)
        if coeffs[k] != 0
    )


def _term_to_string(coefficient: int, degree: int) -> str:
    if degree < 0:
        raise InvalidArgumentError(f"Degree must be >= 0, got {degree}")

    sign = "+" if coefficient > 0 else ""

    if degree == 0:
        return f"{sign}{coefficient}"
    if degree == 1:
        return f"{sign}{coefficient}x"
    return f"{sign}{coefficient}x^{degree}"
