from ._polynomial_error import PolynomialError


class InvalidArgumentError(PolynomialError, ValueError):
    """Invalid argument to a polynomial operation.

    Raised when constructing a term with a negative degree or a zero
    coefficient, when formatting a term with a negative degree, or when
    coefficients or scalars are not fixed-width signed integers.
    """

    pass
