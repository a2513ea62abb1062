"""
Property-based тесты алгебраических законов

Hypothesis генерирует случайные целые; Python int и fractions.Fraction
служат оракулом.

Проверяет:
1. Round-trip литерал → BigInt → str
2. Коммутативность и ассоциативность
3. Тождество деления (a / b) * b + (a % b) == a и усечение к нулю
4. gcd * lcm == |a * b|
5. Инвариант несократимости BigFrac
"""

from fractions import Fraction

import hypothesis.strategies as st
from hypothesis import given, settings

from exactnum.core.domain.fraction import BigFrac
from exactnum.core.domain.integer import ONE, BigInt
from exactnum.core.math.number_theory import gcd, lcm

BIG = 10**30
SMALL = 10**6

big_ints = st.integers(min_value=-BIG, max_value=BIG)
small_ints = st.integers(min_value=-SMALL, max_value=SMALL)
nonzero_big = big_ints.filter(lambda n: n != 0)
nonzero_small = small_ints.filter(lambda n: n != 0)


def _truncated_divmod(a: int, b: int) -> tuple[int, int]:
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - q * b


# =============================================================================
# BIGINT
# =============================================================================


@settings(max_examples=50, deadline=None)
@given(big_ints)
def test_literal_round_trip(n: int) -> None:
    assert str(BigInt(str(n))) == str(n)


@settings(max_examples=50, deadline=None)
@given(big_ints, big_ints)
def test_addition_matches_int_and_commutes(a: int, b: int) -> None:
    x, y = BigInt(a), BigInt(b)
    assert int(x + y) == a + b
    assert x + y == y + x
    assert int(x - y) == a - b


@settings(max_examples=30, deadline=None)
@given(big_ints, big_ints, big_ints)
def test_addition_associative(a: int, b: int, c: int) -> None:
    x, y, z = BigInt(a), BigInt(b), BigInt(c)
    assert (x + y) + z == x + (y + z)


@settings(max_examples=30, deadline=None)
@given(big_ints, big_ints)
def test_multiplication_matches_int_and_commutes(a: int, b: int) -> None:
    x, y = BigInt(a), BigInt(b)
    assert int(x * y) == a * b
    assert x * y == y * x


@settings(max_examples=30, deadline=None)
@given(big_ints, nonzero_big)
def test_division_identity_and_truncation(a: int, b: int) -> None:
    x, y = BigInt(a), BigInt(b)
    q, r = x / y, x % y
    assert q * y + r == x
    assert (int(q), int(r)) == _truncated_divmod(a, b)


@settings(max_examples=50, deadline=None)
@given(big_ints, big_ints)
def test_comparison_matches_int(a: int, b: int) -> None:
    x, y = BigInt(a), BigInt(b)
    assert (x < y) == (a < b)
    assert (x <= y) == (a <= b)
    assert (x == y) == (a == b)


@settings(max_examples=30, deadline=None)
@given(nonzero_small, nonzero_small)
def test_gcd_lcm_product(a: int, b: int) -> None:
    x, y = BigInt(a), BigInt(b)
    assert gcd(x, y) * lcm(x, y) == abs(x * y)


@settings(max_examples=50, deadline=None)
@given(big_ints)
def test_abs_idempotent(n: int) -> None:
    x = BigInt(n)
    assert abs(abs(x)) == abs(x)
    assert not (-BigInt(0)).negative


# =============================================================================
# BIGFRAC
# =============================================================================


def _assert_reduced(x: BigFrac) -> None:
    assert not x.denominator.negative
    assert gcd(x.numerator, x.denominator) == ONE


def _as_fraction(x: BigFrac) -> Fraction:
    return Fraction(int(x.numerator), int(x.denominator))


@settings(max_examples=30, deadline=None)
@given(small_ints, nonzero_small, small_ints, nonzero_small)
def test_fraction_operations_reduced_and_exact(a: int, b: int, c: int, d: int) -> None:
    x, y = BigFrac(a, b), BigFrac(c, d)
    fx, fy = Fraction(a, b), Fraction(c, d)

    _assert_reduced(x)
    for result, expected in ((x + y, fx + fy), (x - y, fx - fy), (x * y, fx * fy)):
        _assert_reduced(result)
        assert _as_fraction(result) == expected

    if c != 0:
        _assert_reduced(x / y)
        assert _as_fraction(x / y) == fx / fy


@settings(max_examples=30, deadline=None)
@given(small_ints, nonzero_small, small_ints, nonzero_small)
def test_fraction_comparison_matches(a: int, b: int, c: int, d: int) -> None:
    x, y = BigFrac(a, b), BigFrac(c, d)
    fx, fy = Fraction(a, b), Fraction(c, d)
    assert (x < y) == (fx < fy)
    assert (x == y) == (fx == fy)
    assert (x >= y) == (fx >= fy)
