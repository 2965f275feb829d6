import torch
from torch import Tensor

from ._polynomial import Polynomial


def polynomial_trim(p: Polynomial) -> Polynomial:
    """Remove trailing zero coefficients.

    Parameters
    ----------
    p : Polynomial
        Input polynomial.

    Returns
    -------
    Polynomial
        Canonical polynomial: empty coefficients for the zero polynomial,
        otherwise the highest coefficient is non-zero. Idempotent.

    Notes
    -----
    A Polynomial is canonical from construction, so this returns an equal
    copy. Raw coefficients go through the same trimming in ``polynomial()``.

    Examples
    --------
    >>> polynomial_trim(polynomial([1, 2, 0, 0])).coeffs
    tensor([1, 2])
    """
    return _from_coefficients(p.coeffs)


def _trim_coefficients(coeffs: Tensor) -> Tensor:
    n = coeffs.shape[-1]

    mask = coeffs != 0
    if not mask.any():
        return torch.zeros(0, dtype=coeffs.dtype, device=coeffs.device)

    # Find last non-zero position
    indices = torch.arange(n, device=coeffs.device)
    last_nonzero = indices[mask].max().item()

    return coeffs[: last_nonzero + 1].clone()


def _from_coefficients(coeffs: Tensor) -> Polynomial:
    # Only entry point from raw coefficients to Polynomial; always trims.
    return Polynomial(coeffs=_trim_coefficients(coeffs))
