import numbers
from typing import Optional, Sequence, Union

import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor

from intpoly.polynomial._coefficient_overflow_error import (
    CoefficientOverflowError,
)
from intpoly.polynomial._invalid_argument_error import InvalidArgumentError

INTEGER_DTYPES = (torch.int8, torch.int16, torch.int32, torch.int64)


@tensorclass
class Polynomial:
    """Polynomial in one variable with fixed-width integer coefficients.

    Represents p(x) = coeffs[0] + coeffs[1]*x + coeffs[2]*x^2 + ...

    Attributes
    ----------
    coeffs : Tensor
        Coefficients in ascending order, shape (N,) where N = degree + 1.
        coeffs[i] is the coefficient of x^i. Integer dtype (int8, int16,
        int32 or int64).

    Notes
    -----
    Every polynomial is canonical: ``coeffs`` is either empty (the zero
    polynomial, degree -1) or ends with a non-zero coefficient. The
    constructor rejects anything else; ``polynomial()`` trims raw
    coefficients first. Operations never write to an operand's ``coeffs``.

    Examples
    --------
    3x^2 + 5x + 2:
        polynomial([2, 5, 3])

    Operator overloading:
        p + q    # polynomial_add(p, q)
        p - q    # polynomial_subtract(p, q)
        p * q    # polynomial_multiply(p, q)
        p * 3    # polynomial_scale(p, 3)
        -p       # polynomial_negate(p)
    """

    coeffs: Tensor

    def __post_init__(self):
        coeffs = self.coeffs
        if coeffs.dtype not in INTEGER_DTYPES:
            raise InvalidArgumentError(
                f"Coefficients must have a signed integer dtype, got {coeffs.dtype}"
            )
        if coeffs.dim() != 1:
            raise InvalidArgumentError(
                f"Coefficients must be one-dimensional, got shape {tuple(coeffs.shape)}"
            )
        if coeffs.numel() > 0 and coeffs[-1].item() == 0:
            raise InvalidArgumentError(
                "Coefficients must not end with zero; "
                "use polynomial() to build from raw coefficients"
            )

    @classmethod
    def zero(cls, dtype: torch.dtype = torch.int64) -> "Polynomial":
        return cls(coeffs=torch.zeros(0, dtype=dtype))

    def __add__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(self, other)

    def __radd__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_add import polynomial_add

        return polynomial_add(other, self)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(self, other)

    def __rsub__(self, other: "Polynomial") -> "Polynomial":
        from ._polynomial_subtract import polynomial_subtract

        return polynomial_subtract(other, self)

    def __mul__(self, other: Union["Polynomial", int]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(self, other)
        return polynomial_scale(self, other)

    def __rmul__(self, other: Union["Polynomial", int]) -> "Polynomial":
        from ._polynomial_multiply import polynomial_multiply
        from ._polynomial_scale import polynomial_scale

        if isinstance(other, Polynomial):
            return polynomial_multiply(other, self)
        return polynomial_scale(self, other)

    def __neg__(self) -> "Polynomial":
        from ._polynomial_negate import polynomial_negate

        return polynomial_negate(self)


def polynomial(
    coeffs: Union[Tensor, Sequence[int]],
    *,
    dtype: Optional[torch.dtype] = None,
) -> Polynomial:
    """Create polynomial from coefficients.

    Parameters
    ----------
    coeffs : Tensor or sequence of int
        Coefficients in ascending order, shape (N,). May be empty, which
        gives the zero polynomial.
    dtype : torch.dtype, optional
        Integer dtype of the result. Defaults to the dtype of ``coeffs`` when
        it is a tensor, otherwise ``torch.int64``.

    Returns
    -------
    Polynomial
        Canonical polynomial (trailing zero coefficients removed).

    Raises
    ------
    InvalidArgumentError
        If coeffs is not one-dimensional or is not made of signed integers.
    CoefficientOverflowError
        If a coefficient does not fit ``dtype``.

    Examples
    --------
    >>> p = polynomial([2, 5, 3, 0])  # 2 + 5x + 3x^2
    >>> p.coeffs
    tensor([2, 5, 3])
    """
    from ._polynomial_trim import _from_coefficients

    if dtype is not None and dtype not in INTEGER_DTYPES:
        raise InvalidArgumentError(
            f"dtype must be a signed integer dtype, got {dtype}"
        )

    if isinstance(coeffs, Tensor):
        if coeffs.dtype not in INTEGER_DTYPES:
            raise InvalidArgumentError(
                f"Coefficients must have a signed integer dtype, got {coeffs.dtype}"
            )
        if coeffs.dim() != 1:
            raise InvalidArgumentError(
                f"Coefficients must be one-dimensional, got shape {tuple(coeffs.shape)}"
            )
        if dtype is not None and dtype != coeffs.dtype:
            info = torch.iinfo(dtype)
            if coeffs.numel() > 0 and (
                coeffs.min().item() < info.min or coeffs.max().item() > info.max
            ):
                raise CoefficientOverflowError(
                    f"Coefficients do not fit {dtype}"
                )
            coeffs = coeffs.to(dtype)
        return _from_coefficients(coeffs)

    if dtype is None:
        dtype = torch.int64

    values = [_check_integer(value, dtype) for value in coeffs]

    return _from_coefficients(torch.tensor(values, dtype=dtype))


def _check_integer(value: int, dtype: torch.dtype) -> int:
    # bool is an int subclass but never a coefficient
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgumentError(
            f"Coefficients must be integers, got {type(value).__name__}"
        )

    info = torch.iinfo(dtype)
    if not info.min <= value <= info.max:
        raise CoefficientOverflowError(
            f"Coefficient {value} does not fit {dtype} "
            f"(range [{info.min}, {info.max}])"
        )

    return int(value)
