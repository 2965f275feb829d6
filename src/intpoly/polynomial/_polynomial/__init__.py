from ._polynomial import Polynomial, polynomial
from ._polynomial_add import polynomial_add
from ._polynomial_coefficients import polynomial_coefficients
from ._polynomial_degree import polynomial_degree
from ._polynomial_derivative import polynomial_derivative
from ._polynomial_equal import polynomial_equal
from ._polynomial_from_term import polynomial_from_term
from ._polynomial_multiply import polynomial_multiply
from ._polynomial_negate import polynomial_negate
from ._polynomial_print import polynomial_print
from ._polynomial_random import polynomial_random
from ._polynomial_scale import polynomial_scale
from ._polynomial_subtract import polynomial_subtract
from ._polynomial_to_string import ZERO_POLYNOMIAL_STRING, polynomial_to_string
from ._polynomial_trim import polynomial_trim

__all__ = [
    "Polynomial",
    "ZERO_POLYNOMIAL_STRING",
    "polynomial",
    "polynomial_add",
    "polynomial_coefficients",
    "polynomial_degree",
    "polynomial_derivative",
    "polynomial_equal",
    "polynomial_from_term",
    "polynomial_multiply",
    "polynomial_negate",
    "polynomial_print",
    "polynomial_random",
    "polynomial_scale",
    "polynomial_subtract",
    "polynomial_to_string",
    "polynomial_trim",
]
