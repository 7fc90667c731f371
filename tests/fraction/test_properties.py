"""Algebraic laws checked over a spread of sample fractions."""

import itertools

import pytest

from exactfrac import Fraction

SAMPLES = [
    Fraction(0),
    Fraction(4, 0),
    Fraction(1),
    Fraction(-1),
    Fraction(5, 3),
    Fraction(-10, -6),
    Fraction(5, -10),
    Fraction(-12, 24),
    Fraction(7, 2),
    Fraction(10**20 + 1, 3),
]
NONZERO = [f for f in SAMPLES if not f.is_zero()]
PAIRS = list(itertools.product(SAMPLES, repeat=2))
TRIPLES = list(itertools.product(SAMPLES[::3], repeat=3))


class TestConstructionProperties:
    """Normalization laws."""

    @pytest.mark.parametrize("n", [0, 1, -1, 42, -(2**70), 10**30])
    def test_from_integer_prints_decimal(self, n):
        """Test fromInteger(n) prints as n."""
        assert Fraction.from_integer(n).to_string() == str(n)

    @pytest.mark.parametrize("p, q", [(1, 2), (-3, 4), (6, 8), (5, -7), (0, 9), (10**25, 3)])
    def test_negating_both_terms_is_same_value(self, p, q):
        """Test p/q and -p/-q are equal and print the same."""
        a, b = Fraction.from_ratio(p, q), Fraction.from_ratio(-p, -q)
        assert a.is_equal_to(b)
        assert a.to_string() == b.to_string()

    @pytest.mark.parametrize("p", [0, 1, -5, 10**30])
    def test_zero_denominator_is_zero(self, p):
        """Test p/0 equals 0/0 and prints as 0."""
        a = Fraction.from_ratio(p, 0)
        assert a.is_equal_to(Fraction.from_ratio(0, 0))
        assert a.to_string() == "0"
        assert Fraction.from_ratio(0, 0).to_string() == "0"


class TestArithmeticProperties:
    """Field laws."""

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_add_commutative(self, a, b):
        assert a.add(b).is_equal_to(b.add(a))

    @pytest.mark.parametrize("a, b, c", TRIPLES)
    def test_add_associative(self, a, b, c):
        assert a.add(b).add(c).is_equal_to(a.add(b.add(c)))

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_multiply_commutative(self, a, b):
        assert a.multiply(b).is_equal_to(b.multiply(a))

    @pytest.mark.parametrize("a, b, c", TRIPLES)
    def test_distributive(self, a, b, c):
        assert a.multiply(b.add(c)).is_equal_to(a.multiply(b).add(a.multiply(c)))

    @pytest.mark.parametrize("a", SAMPLES)
    def test_additive_inverse(self, a):
        assert a.add(a.negate()).is_equal_to(Fraction(0))

    @pytest.mark.parametrize("a", NONZERO)
    def test_multiplicative_inverse(self, a):
        assert a.multiply(a.invert()).is_equal_to(Fraction.from_integer(1))

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_subtract_then_add(self, a, b):
        assert a.subtract(b).add(b).is_equal_to(a)

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("b", NONZERO)
    def test_divide_then_multiply(self, a, b):
        assert a.divide(b).multiply(b).is_equal_to(a)


class TestPowerProperties:
    """Exponent laws."""

    @pytest.mark.parametrize("a", SAMPLES)
    def test_zero_exponent(self, a):
        assert a.pow(0).is_equal_to(Fraction.from_integer(1))

    @pytest.mark.parametrize("a", SAMPLES)
    @pytest.mark.parametrize("e", [1, 2, 3, 7])
    def test_negative_exponent_is_inverse(self, a, e):
        assert a.pow(-e).is_equal_to(a.pow(e).invert())

    @pytest.mark.parametrize("a", NONZERO)
    def test_product_of_powers(self, a):
        assert a.pow(2).multiply(a.pow(3)).is_equal_to(a.pow(5))
        assert a.pow(2).multiply(a.pow(-2)).is_equal_to(Fraction(1))


class TestOrderingProperties:
    """Total order laws."""

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_antisymmetric(self, a, b):
        assert a.compare_to(b) == -b.compare_to(a)

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_max_min(self, a, b):
        bigger = a if a.compare_to(b) >= 0 else b
        smaller = b if a.compare_to(b) >= 0 else a
        assert a.max(b).is_equal_to(bigger)
        assert a.min(b).is_equal_to(smaller)
        assert a.max(b).compare_to(a.min(b)) >= 0

    @pytest.mark.parametrize("a, b, c", TRIPLES)
    def test_transitive(self, a, b, c):
        if a.compare_to(b) <= 0 and b.compare_to(c) <= 0:
            assert a.compare_to(c) <= 0

    @pytest.mark.parametrize("a, b", PAIRS)
    def test_equality_consistent_with_hash(self, a, b):
        if a == b:
            assert hash(a) == hash(b)

    @pytest.mark.parametrize("a", SAMPLES)
    def test_signum_matches_compare_to_zero(self, a):
        assert a.signum() == a.compare_to(Fraction(0))
