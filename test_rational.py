import math
import pytest
import numpy as np

from fractions import Fraction

from rational import Rational, ZeroDenominatorError


@pytest.mark.parametrize("num, den", [
    (0, 1), (0, -7), (1, 1), (2, 4), (-6, 9), (6, -9), (-12, -18), (7, 13),
    (10**20, 10**18), (2**64 + 2, 2),
])
def test_reduction_invariant(num, den):
    r = Rational(num, den)
    if r.numerator == 0:
        assert r.denominator == 1
    else:
        assert math.gcd(r.numerator, r.denominator) == 1
    assert Fraction(r.numerator, r.denominator) == Fraction(num, den)


def test_default_and_integer_construction():
    assert (Rational().numerator, Rational().denominator) == (0, 1)
    assert (Rational(5).numerator, Rational(5).denominator) == (5, 1)
    assert (Rational(2, 4).numerator, Rational(2, 4).denominator) == (1, 2)


def test_denominator_sign_is_kept():
    r = Rational(2, -4)
    assert (r.numerator, r.denominator) == (1, -2)
    assert r == Rational(-1, 2)
    assert r.negative()
    assert not r.positive()
    assert r.sign() == -1


@pytest.mark.parametrize("num", [0, 1, -3])
def test_zero_denominator_raises(num):
    with pytest.raises(ZeroDenominatorError):
        Rational(num, 0)
    with pytest.raises(ZeroDivisionError):
        Rational(num, 0)


def test_division_by_zero_value_raises():
    with pytest.raises(ZeroDenominatorError):
        Rational(1, 2) / Rational(0, 5)
    with pytest.raises(ZeroDenominatorError):
        Rational(1, 2).divide(Rational())
    with pytest.raises(ZeroDenominatorError):
        3 / Rational(0)


@pytest.mark.parametrize("args", [(0.5,), (1, 2.0), ("1/2",), (None,)])
def test_non_integer_components_rejected(args):
    with pytest.raises(TypeError):
        Rational(*args)


def test_arithmetic_literals():
    assert Rational(1, 2) + Rational(1, 3) == Rational(5, 6)
    assert Rational(2, 4) == Rational(1, 2)
    assert Rational(1, 3) * Rational(3, 1) == Rational(1)
    assert Rational(1, 2) - Rational(1, 3) == Rational(1, 6)
    assert Rational(1, 2) / Rational(1, 4) == Rational(2)
    assert Rational(1, 3).add(Rational(2, 3)) == 1
    assert Rational(3, 4).subtract(Rational(3, 4)).is_zero()
    assert Rational(2, 3).multiply(Rational(3, 2)) == 1
    assert Rational(2, 3).divide(Rational(4, 3)) == Rational(1, 2)


def test_mixed_integer_operands():
    assert Rational(1, 2) + 1 == Rational(3, 2)
    assert 1 - Rational(1, 4) == Rational(3, 4)
    assert 3 * Rational(1, 3) == 1
    assert 1 / Rational(1, 5) == 5
    assert -Rational(1, 2) == Rational(-1, 2)
    assert abs(Rational(1, -2)) == Rational(1, 2)


def test_results_are_new_values():
    a = Rational(1, 2)
    b = a + Rational(1, 2)
    assert a == Rational(1, 2)
    assert b == 1
    with pytest.raises(AttributeError):
        a.numerator = 3


def test_positive_follows_numerator_denominator_signs():
    assert Rational(1, 2).positive()
    assert Rational(-1, -2).positive()
    assert not Rational(0, 3).positive()
    assert not Rational(-1, 2).positive()
    # product keeps a negative denominator but the value is positive
    r = Rational(1, -2) * Rational(-1, 3)
    assert r.positive()
    assert r == Rational(1, 6)


@pytest.mark.parametrize("a, b", [
    (Rational(1, -1), Rational(0)),
    (Rational(-3, 4), Rational(2, -3)),
    (Rational(1, 3), Rational(1, 2)),
    (Rational(-5, -7), Rational(5, 7)),
])
def test_comparisons_with_negative_denominators(a, b):
    fa = Fraction(a.numerator, a.denominator)
    fb = Fraction(b.numerator, b.denominator)
    assert (a < b) == (fa < fb)
    assert (a <= b) == (fa <= fb)
    assert (a > b) == (fa > fb)
    assert (a >= b) == (fa >= fb)
    assert (a == b) == (fa == fb)
    assert a.less_than(b) == (fa < fb)


def test_comparison_consistency():
    np.random.seed(42)
    nums = np.random.randint(-1000, 1000, size=(500, 2))
    dens = np.random.randint(1, 1000, size=(500, 2)) * np.random.choice([-1, 1], size=(500, 2))
    for (n1, n2), (d1, d2) in zip(nums, dens):
        a = Rational(int(n1), int(d1))
        b = Rational(int(n2), int(d2))
        outcomes = [a < b, a == b, a > b]
        assert sum(outcomes) == 1

        expected = Fraction(int(n1), int(d1)) - Fraction(int(n2), int(d2))
        sign = (expected > 0) - (expected < 0)
        assert a.compare(b) == sign
        assert (a - b).sign() == sign


def test_beyond_64_bit_range():
    big = 10**30
    a = Rational(big + 1, big)
    b = Rational(big, big - 1)
    assert a < b
    assert a != b
    assert Rational(2**63 + 1, 3) > Rational(2**63, 3)
    assert Rational(2**62) * Rational(2**62) == Rational(2**124)
    assert (Rational(1, 2**70) + Rational(1, 2**70)) == Rational(1, 2**69)


def test_hash_matches_equality():
    assert hash(Rational(1, -2)) == hash(Rational(-1, 2))
    assert hash(Rational(4, 2)) == hash(2)
    assert len({Rational(1, 2), Rational(2, 4), Rational(-1, -2), Rational(1, 3)}) == 2


def test_from_float_is_exact():
    assert Rational.from_float(0.5) == Rational(1, 2)
    assert Rational.from_float(-2.0) == -2
    assert Rational.from_float(0.3) != Rational(3, 10)
    with pytest.raises(ValueError):
        Rational.from_float(float("nan"))
    with pytest.raises(ValueError):
        Rational.from_float(float("inf"))


def test_text_form():
    assert str(Rational(1)) == "1/1"
    assert str(Rational(3, 6)) == "1/2"
    assert repr(Rational(-2, 4)) == "Rational(-1, 2)"
    assert float(Rational(1, 4)) == 0.25
