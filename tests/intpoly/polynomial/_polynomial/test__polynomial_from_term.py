# tests/intpoly/polynomial/_polynomial/test__polynomial_from_term.py
import numpy as np
import pytest
import torch

from intpoly.polynomial import (
    CoefficientOverflowError,
    InvalidArgumentError,
    polynomial_degree,
    polynomial_from_term,
)


class TestPolynomialFromTerm:
    """Tests for polynomial_from_term."""

    def test_constant_term(self):
        """Degree-0 term is a constant."""
        p = polynomial_from_term(7, 0)
        assert p.coeffs.tolist() == [7]
        assert polynomial_degree(p) == 0

    def test_higher_degree_term(self):
        """Only the coefficient at the given degree is set."""
        p = polynomial_from_term(-4, 3)
        assert p.coeffs.tolist() == [0, 0, 0, -4]
        assert polynomial_degree(p) == 3

    def test_dtype(self):
        """Requested dtype is used."""
        p = polynomial_from_term(5, 1, dtype=torch.int16)
        assert p.coeffs.dtype == torch.int16

    def test_negative_degree_raises(self):
        """Negative degree raises error."""
        with pytest.raises(InvalidArgumentError, match="less than 0"):
            polynomial_from_term(1, -1)

    def test_zero_coefficient_raises(self):
        """Zero coefficient raises error."""
        with pytest.raises(InvalidArgumentError, match="0 valued"):
            polynomial_from_term(0, 3)

    def test_zero_coefficient_constant_raises(self):
        """Zero coefficient is rejected at degree 0 as well."""
        with pytest.raises(InvalidArgumentError):
            polynomial_from_term(0, 0)

    def test_non_integer_coefficient_raises(self):
        """Float coefficient raises error."""
        with pytest.raises(InvalidArgumentError):
            polynomial_from_term(1.5, 2)

    def test_numpy_integer_degree(self):
        """NumPy integer degrees are accepted."""
        p = polynomial_from_term(3, np.int64(2))
        assert polynomial_degree(p) == 2
        assert p.coeffs.tolist() == [0, 0, 3]

    def test_non_integer_degree_raises(self):
        """Float degree raises error."""
        with pytest.raises(InvalidArgumentError):
            polynomial_from_term(1, 2.0)

    def test_float_dtype_raises(self):
        """Floating dtype raises error."""
        with pytest.raises(InvalidArgumentError):
            polynomial_from_term(1, 2, dtype=torch.float64)

    def test_coefficient_out_of_range_raises(self):
        """Coefficient must fit dtype."""
        with pytest.raises(CoefficientOverflowError):
            polynomial_from_term(128, 0, dtype=torch.int8)
