from fractions import Fraction

import pytest
from hypothesis import given
from hypothesis import strategies as st

from recombine.errors import DivisionByZero
from recombine.interpolate import basis_at_zero, constant_term
from recombine.points import Point
from recombine.rational import Rational


def _evaluate(coefficients, x):
    y = 0
    for coefficient in reversed(coefficients):
        y = y * x + coefficient
    return y


def _reference(points):
    total = Fraction(0)
    for j, pj in enumerate(points):
        term = Fraction(pj.y)
        for i, pi in enumerate(points):
            if i != j:
                term *= Fraction(-pi.x, pj.x - pi.x)
        total += term
    return total


def test_basis_at_zero():
    points = [Point(1, 0), Point(2, 0), Point(3, 0)]
    assert basis_at_zero(points, 0) == ((-2) * (-3), (1 - 2) * (1 - 3))
    assert basis_at_zero(points, 1) == ((-1) * (-3), (2 - 1) * (2 - 3))


def test_quadratic_constant_term():
    points = [Point(1, 8), Point(2, 17), Point(3, 30)]
    assert constant_term(points) == Rational(3, 1)


def test_fractional_intercept():
    assert constant_term([Point(1, 2), Point(3, 5)]) == Rational(1, 2)


def test_single_point_is_constant():
    assert constant_term([Point(7, -11)]) == Rational(-11, 1)


def test_negative_result_has_positive_denominator():
    result = constant_term([Point(1, -2), Point(3, -5)])
    assert result == Rational(-1, 2)


def test_duplicate_x_is_division_by_zero():
    with pytest.raises(DivisionByZero):
        constant_term([Point(2, 1), Point(2, 5)])


def test_empty_points_rejected():
    with pytest.raises(ValueError):
        constant_term([])


def test_large_coordinates():
    secret = 2**521 - 1
    coefficients = [secret, 3**200, -(7**90)]
    points = [Point(x, _evaluate(coefficients, x)) for x in (10**30, 10**30 + 1, -(2**100))]
    assert constant_term(points) == Rational.from_int(secret)


@given(
    st.lists(st.integers(-(10**6), 10**6), min_size=1, max_size=6),
    st.lists(st.integers(-50, 50), min_size=6, max_size=10, unique=True),
)
def test_recovers_integer_polynomial(coefficients, xs):
    points = [Point(x, _evaluate(coefficients, x)) for x in xs[: len(coefficients)]]
    assert constant_term(points) == Rational.from_int(coefficients[0])


@given(
    st.lists(
        st.tuples(st.integers(-1000, 1000), st.integers(-(10**9), 10**9)),
        min_size=1,
        max_size=7,
        unique_by=lambda pair: pair[0],
    )
)
def test_matches_fraction_reference(pairs):
    points = [Point(x, y) for x, y in pairs]
    result = constant_term(points)
    expected = _reference(points)
    assert (result.numerator, result.denominator) == (expected.numerator, expected.denominator)
