from torch import Tensor

from ._polynomial import Polynomial


def polynomial_coefficients(p: Polynomial) -> Tensor:
    """Return a copy of the coefficients of ``p`` in ascending order.

    Writing to the returned tensor does not affect ``p``.
    """
    return p.coeffs.clone()
