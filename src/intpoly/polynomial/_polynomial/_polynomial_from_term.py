import numbers

import torch

from intpoly.polynomial._invalid_argument_error import InvalidArgumentError

from ._polynomial import INTEGER_DTYPES, Polynomial, _check_integer


def polynomial_from_term(
    coefficient: int,
    degree: int,
    *,
    dtype: torch.dtype = torch.int64,
) -> Polynomial:
    """Create the single-term polynomial ``coefficient * x^degree``.

    Parameters
    ----------
    coefficient : int
        Non-zero coefficient of the term.
    degree : int
        Non-negative degree of the term.
    dtype : torch.dtype
        Signed integer dtype of the coefficients (default ``torch.int64``).

    Returns
    -------
    Polynomial
        Polynomial with ``degree + 1`` coefficients, all zero except the
        one at index ``degree``.

    Raises
    ------
    InvalidArgumentError
        If degree is negative or coefficient is zero. A zero coefficient is
        rejected even at degree 0; use ``Polynomial.zero()`` for the zero
        polynomial.
    CoefficientOverflowError
        If coefficient does not fit ``dtype``.

    Examples
    --------
    >>> polynomial_from_term(3, 2).coeffs  # 3x^2
    tensor([0, 0, 3])
    """
    if isinstance(degree, bool) or not isinstance(degree, numbers.Integral):
        raise InvalidArgumentError(
            f"Degree must be an integer, got {type(degree).__name__}"
        )
    if degree < 0:
        raise InvalidArgumentError(
            f"Degree of polynomial cannot be less than 0, got {degree}"
        )
    degree = int(degree)
    if dtype not in INTEGER_DTYPES:
        raise InvalidArgumentError(
            f"dtype must be a signed integer dtype, got {dtype}"
        )

    coefficient = _check_integer(coefficient, dtype)
    if coefficient == 0:
        raise InvalidArgumentError("0 valued coefficient invalid")

    coeffs = torch.zeros(degree + 1, dtype=dtype)
    coeffs[degree] = coefficient

    return Polynomial(coeffs=coeffs)
