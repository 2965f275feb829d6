"""Testing helpers for intpoly.

Hypothesis strategies for generating polynomials live in
``intpoly.testing.strategies``:

    import hypothesis
    from intpoly.testing.strategies import polynomials

    @hypothesis.given(polynomials())
    def test_something(p):
        ...
"""

from . import strategies

__all__ = [
    "strategies",
]
