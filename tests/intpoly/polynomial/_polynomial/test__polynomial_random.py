# tests/intpoly/polynomial/_polynomial/test__polynomial_random.py
import pytest
import torch

from intpoly.polynomial import (
    CoefficientOverflowError,
    InvalidArgumentError,
    polynomial_degree,
    polynomial_equal,
    polynomial_random,
)


class TestPolynomialRandom:
    """Tests for polynomial_random."""

    def test_deterministic_with_seed(self):
        """Same seed gives the same polynomial."""
        p = polynomial_random(6, generator=torch.Generator().manual_seed(42))
        q = polynomial_random(6, generator=torch.Generator().manual_seed(42))
        assert polynomial_equal(p, q)

    def test_degree_at_most_requested(self):
        """Leading terms may cancel but never exceed the degree."""
        generator = torch.Generator().manual_seed(0)
        for _ in range(50):
            p = polynomial_random(4, generator=generator)
            assert polynomial_degree(p) <= 4

    def test_coefficients_bounded(self):
        """At most two terms of magnitude max_coefficient per degree."""
        generator = torch.Generator().manual_seed(1)
        for _ in range(50):
            p = polynomial_random(5, generator=generator, max_coefficient=3)
            assert all(abs(c) <= 6 for c in p.coeffs.tolist())

    def test_canonical(self):
        """Results have no trailing zeros."""
        generator = torch.Generator().manual_seed(2)
        for _ in range(50):
            p = polynomial_random(3, generator=generator, max_coefficient=1)
            assert p.coeffs.numel() == 0 or p.coeffs[-1].item() != 0

    def test_single_term_when_never_adding(self):
        """zero_probability=1 keeps only the leading term."""
        generator = torch.Generator().manual_seed(3)
        p = polynomial_random(5, generator=generator, zero_probability=1.0)
        assert polynomial_degree(p) == 5
        assert torch.count_nonzero(p.coeffs).item() == 1

    def test_dtype(self):
        """Requested dtype is used."""
        generator = torch.Generator().manual_seed(4)
        p = polynomial_random(
            2, generator=generator, zero_probability=1.0, dtype=torch.int8
        )
        assert p.coeffs.dtype == torch.int8

    def test_default_generator(self):
        """Without a generator the default one is used."""
        p = polynomial_random(3, zero_probability=1.0)
        assert polynomial_degree(p) == 3

    def test_negative_degree_raises(self):
        with pytest.raises(InvalidArgumentError):
            polynomial_random(-1)

    def test_max_coefficient_raises(self):
        with pytest.raises(InvalidArgumentError):
            polynomial_random(2, max_coefficient=0)

    def test_zero_probability_raises(self):
        with pytest.raises(InvalidArgumentError):
            polynomial_random(2, zero_probability=1.5)

    def test_max_coefficient_must_fit_dtype(self):
        with pytest.raises(CoefficientOverflowError):
            polynomial_random(2, max_coefficient=200, dtype=torch.int8)

    def test_max_coefficient_at_int64_limit(self):
        g = torch.Generator().manual_seed(0)
        p = polynomial_random(
            1,
            generator=g,
            max_coefficient=torch.iinfo(torch.int64).max,
            zero_probability=1.0,
        )
        assert polynomial_degree(p) == 1

    def test_non_integer_max_coefficient_raises(self):
        with pytest.raises(InvalidArgumentError):
            polynomial_random(2, max_coefficient=2.5)
