from typing import Optional

import torch
from torch import Generator

from intpoly.polynomial._invalid_argument_error import InvalidArgumentError

from ._checked import OverflowPolicy
from ._polynomial import Polynomial, _check_integer
from ._polynomial_add import polynomial_add
from ._polynomial_from_term import polynomial_from_term


def polynomial_random(
    degree: int,
    *,
    generator: Optional[Generator] = None,
    max_coefficient: int = 20,
    zero_probability: float = 1.0 / 3.0,
    dtype: torch.dtype = torch.int64,
    overflow: OverflowPolicy = "raise",
) -> Polynomial:
    """Generate a random sample polynomial.

    Starts from a random term of the requested degree, then walks the
    degrees from ``degree`` down to 0 and, with probability
    ``1 - zero_probability``, adds another random term at that degree.
    Every term has a coefficient of magnitude in ``[1, max_coefficient]``
    and a random sign.

    Parameters
    ----------
    degree : int
        Degree of the leading term. The result may have a lower degree when
        the two terms drawn at ``degree`` cancel.
    generator : torch.Generator, optional
        A pseudorandom number generator for sampling. If None, uses the
        default generator.
    max_coefficient : int
        Largest coefficient magnitude of a single term.
    zero_probability : float
        Probability of not adding a term at a given degree.
    dtype : torch.dtype
        Signed integer dtype of the coefficients.
    overflow : {"raise", "wrap"}
        Overflow policy for summing terms of the same degree.

    Returns
    -------
    Polynomial
        Canonical random polynomial.

    Raises
    ------
    InvalidArgumentError
        If degree is negative, max_coefficient is less than 1, or
        zero_probability is outside [0, 1].
    CoefficientOverflowError
        If max_coefficient does not fit ``dtype``.

    Examples
    --------
    >>> g = torch.Generator().manual_seed(0)
    >>> p = polynomial_random(6, generator=g)
    >>> polynomial_degree(p) <= 6
    True
    """
    if degree < 0:
        raise InvalidArgumentError(
            f"Degree of polynomial cannot be less than 0, got {degree}"
        )
    max_coefficient = _check_integer(max_coefficient, dtype)
    if max_coefficient < 1:
        raise InvalidArgumentError(
            f"max_coefficient must be at least 1, got {max_coefficient}"
        )
    if not 0.0 <= zero_probability <= 1.0:
        raise InvalidArgumentError(
            f"zero_probability must be in [0, 1], got {zero_probability}"
        )

    def draw_coefficient() -> int:
        # high is exclusive; drawing [0, max) keeps it within int64
        magnitude = (
            torch.randint(0, max_coefficient, (), generator=generator).item()
            + 1
        )
        negative = torch.randint(0, 2, (), generator=generator).item() == 0
        return -magnitude if negative else magnitude

    result = polynomial_from_term(draw_coefficient(), degree, dtype=dtype)

    for k in range(degree, -1, -1):
        if torch.rand((), generator=generator).item() < zero_probability:
            continue
        result = polynomial_add(
            result,
            polynomial_from_term(draw_coefficient(), k, dtype=dtype),
            overflow=overflow,
        )

    return result
