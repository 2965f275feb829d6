from typing import Optional, TextIO

from ._polynomial import Polynomial
from ._polynomial_to_string import polynomial_to_string


def polynomial_print(p: Polynomial, file: Optional[TextIO] = None) -> None:
    """Write ``polynomial_to_string(p)`` and a newline to ``file``.

    ``file`` defaults to ``sys.stdout``.
    """
    print(polynomial_to_string(p), file=file)
