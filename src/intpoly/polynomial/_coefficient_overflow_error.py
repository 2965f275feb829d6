from ._polynomial_error import PolynomialError


class CoefficientOverflowError(PolynomialError, OverflowError):
    """Coefficient does not fit the polynomial's integer dtype.

    Raised by arithmetic under ``overflow="raise"`` when a result coefficient
    falls outside the range of the fixed-width dtype, and by constructors
    given a value the dtype cannot represent.
    """

    pass
