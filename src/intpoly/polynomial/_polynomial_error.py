class PolynomialError(Exception):
    """Base class for all errors raised by polynomial operations."""

    pass
