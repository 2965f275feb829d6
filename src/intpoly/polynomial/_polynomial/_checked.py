"""Fixed-width integer arithmetic with overflow detection.

Coefficients live in signed integer tensors, so ``+`` and ``*`` wrap around
on overflow exactly like two's-complement machine integers. The helpers here
return the wrapped result together with a boolean mask marking the entries
that wrapped; ``report_overflow`` then applies the caller's overflow policy.

Overflow policies:
 - "raise": raise CoefficientOverflowError if any entry wrapped
 - "wrap": keep the wrapped values and emit a RuntimeWarning
"""

import warnings
from typing import Literal, Tuple

import torch
from torch import Tensor

from intpoly.polynomial._coefficient_overflow_error import (
    CoefficientOverflowError,
)
from intpoly.polynomial._invalid_argument_error import InvalidArgumentError

OverflowPolicy = Literal["raise", "wrap"]

_OVERFLOW_POLICIES = ("raise", "wrap")


def check_overflow_policy(overflow: str) -> None:
    if overflow not in _OVERFLOW_POLICIES:
        raise InvalidArgumentError(
            f"Unknown overflow policy {overflow!r}, "
            f"expected one of {_OVERFLOW_POLICIES}"
        )


def promote(a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    """Cast two coefficient tensors to their common integer dtype."""
    common_dtype = torch.promote_types(a.dtype, b.dtype)
    return a.to(common_dtype), b.to(common_dtype)


def checked_add(a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    """Elementwise ``a + b`` and the mask of entries that overflowed."""
    result = a + b
    # Overflow iff both operands share a sign and the result does not.
    overflowed = ((a ^ result) & (b ^ result)) < 0
    return result, overflowed


def add_with_carry(a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    """Elementwise ``a + b`` and the signed wrap count of each entry.

    The count is +1 where the sum wrapped past the maximum, -1 where it
    wrapped past the minimum and 0 otherwise. Summing the counts over a
    chain of additions gives the net wrap of the accumulated value: the
    accumulated value is exact iff the net count is 0.
    """
    result, overflowed = checked_add(a, b)
    # Both operands share a sign when overflowing; b's sign is the direction.
    direction = torch.where(b >= 0, 1, -1)
    carry = torch.where(overflowed, direction, 0).to(torch.int64)
    return result, carry


def checked_multiply(a: Tensor, b: Tensor) -> Tuple[Tensor, Tensor]:
    """Elementwise ``a * b`` and the mask of entries that overflowed."""
    result = a * b
    a, b = torch.broadcast_tensors(a, b)
    info = torch.iinfo(result.dtype)

    # a == -1 is handled apart: min // -1 itself overflows.
    divisible = (a != 0) & (a != -1)
    divisor = torch.where(divisible, a, torch.ones_like(a))
    quotient = torch.div(result, divisor, rounding_mode="trunc")

    overflowed = (divisible & (quotient != b)) | ((a == -1) & (b == info.min))
    return result, overflowed


def report_overflow(
    overflowed: Tensor,
    operation: str,
    overflow: OverflowPolicy,
) -> None:
    if not overflowed.any():
        return

    count = int(overflowed.sum().item())
    if overflow == "raise":
        raise CoefficientOverflowError(
            f"{operation}: {count} coefficient(s) overflowed the "
            f"fixed-width integer dtype"
        )

    warnings.warn(
        f"{operation}: {count} coefficient(s) wrapped around. "
        f"Consider a wider dtype such as torch.int64.",
        RuntimeWarning,
        stacklevel=3,
    )
