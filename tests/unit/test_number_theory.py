"""
Тесты для модуля Number Theory

Проверяет:
1. factorial / fibonacci / binomial (включая отказ для отрицательных)
2. gcd / lcm по комбинациям знаков и нулям
3. isqrt (итерация Ньютона)
4. Чётность и длину
"""

import logging
import math

import pytest

from exactnum.core.domain.integer import ONE, ZERO, BigInt
from exactnum.core.errors import NegativeArgument
from exactnum.core.math.number_theory import (
    binomial,
    factorial,
    fibonacci,
    gcd,
    integer_length,
    is_even,
    is_odd,
    isqrt,
    lcm,
)

# =============================================================================
# FACTORIAL / FIBONACCI / BINOMIAL
# =============================================================================


class TestFactorial:
    """Тесты для factorial"""

    def test_small_values(self) -> None:
        assert factorial(0) == ONE
        assert factorial(1) == ONE
        assert factorial(5) == BigInt("120")

    def test_matches_math_factorial(self) -> None:
        for n in (10, 20, 25, 40):
            assert str(factorial(n)) == str(math.factorial(n))

    def test_negative_raises(self) -> None:
        with pytest.raises(NegativeArgument):
            factorial(-1)

    def test_large_result_converts_to_int(self) -> None:
        """2000! содержит 5736 цифр: больше лимита int/str преобразования"""
        result = factorial(2000)
        assert len(result.magnitude) == 5736
        assert int(result) == math.factorial(2000)

    def test_negative_argument_is_value_error(self) -> None:
        with pytest.raises(ValueError, match="negative"):
            factorial(-5)

    def test_logs_progress_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Долгие операции пишут DEBUG-лог"""
        with caplog.at_level(logging.DEBUG, logger="exactnum.core.math.number_theory"):
            factorial(6)
        assert "factorial(6) finished" in caplog.text


class TestFibonacci:
    """Тесты для fibonacci"""

    def test_base_cases(self) -> None:
        assert fibonacci(0) == ZERO
        assert fibonacci(1) == ONE
        assert fibonacci(2) == ONE

    def test_known_values(self) -> None:
        assert fibonacci(10) == BigInt("55")
        assert fibonacci(100) == BigInt("354224848179261915075")

    def test_negative_raises(self) -> None:
        with pytest.raises(NegativeArgument):
            fibonacci(-1)


class TestBinomial:
    """Тесты для binomial"""

    def test_concrete_case(self) -> None:
        assert binomial(5, 2) == BigInt("10")

    def test_edges_return_one(self) -> None:
        assert binomial(5, 0) == ONE
        assert binomial(5, 5) == ONE
        assert binomial(0, 0) == ONE

    def test_out_of_domain_returns_zero(self) -> None:
        """k > n, k < 0, n < 0 → 0"""
        assert binomial(5, 6) == ZERO
        assert binomial(5, -1) == ZERO
        assert binomial(-1, 0) == ZERO

    def test_matches_math_comb(self) -> None:
        for n, k in ((10, 3), (30, 15), (40, 7)):
            assert str(binomial(n, k)) == str(math.comb(n, k))


# =============================================================================
# GCD / LCM
# =============================================================================


class TestGCD:
    """Тесты для gcd"""

    def test_concrete_case(self) -> None:
        assert gcd(BigInt("48"), BigInt("18")) == BigInt("6")

    def test_signs_ignored(self) -> None:
        assert gcd(BigInt("-48"), BigInt("18")) == BigInt("6")
        assert gcd(BigInt("48"), BigInt("-18")) == BigInt("6")
        assert gcd(BigInt("-48"), BigInt("-18")) == BigInt("6")

    def test_zeros(self) -> None:
        assert gcd(ZERO, ZERO) == ZERO
        assert gcd(BigInt("7"), ZERO) == BigInt("7")
        assert gcd(BigInt("-7"), ZERO) == BigInt("7")
        assert gcd(ZERO, BigInt("-9")) == BigInt("9")

    def test_coprime(self) -> None:
        assert gcd(BigInt("17"), BigInt("5")) == ONE

    def test_large(self) -> None:
        a = 2**64 * 3**20
        b = 2**40 * 3**25 * 7
        assert str(gcd(BigInt(a), BigInt(b))) == str(math.gcd(a, b))


class TestLCM:
    """Тесты для lcm"""

    def test_basic(self) -> None:
        assert lcm(BigInt("4"), BigInt("6")) == BigInt("12")
        assert lcm(BigInt("21"), BigInt("6")) == BigInt("42")

    def test_negative_operands_give_positive(self) -> None:
        assert lcm(BigInt("-4"), BigInt("6")) == BigInt("12")
        assert lcm(BigInt("4"), BigInt("-6")) == BigInt("12")
        assert lcm(BigInt("-4"), BigInt("-6")) == BigInt("12")

    def test_zero(self) -> None:
        assert lcm(ZERO, BigInt("5")) == ZERO
        assert lcm(BigInt("5"), ZERO) == ZERO

    def test_gcd_lcm_product(self) -> None:
        """gcd(a, b) * lcm(a, b) == |a * b|"""
        for a, b in ((12, 18), (-12, 18), (7, -13), (100, 75), (-36, -48)):
            x, y = BigInt(a), BigInt(b)
            assert gcd(x, y) * lcm(x, y) == abs(x * y)


# =============================================================================
# ISQRT
# =============================================================================


class TestIsqrt:
    """Тесты для isqrt"""

    def test_trivial(self) -> None:
        assert isqrt(ZERO) == ZERO
        assert isqrt(ONE) == ONE

    def test_small_values_match_math(self) -> None:
        for n in range(0, 120):
            assert int(isqrt(BigInt(n))) == math.isqrt(n)

    def test_perfect_square(self) -> None:
        assert isqrt(BigInt("1" + "0" * 20)) == BigInt("1" + "0" * 10)

    def test_just_below_square(self) -> None:
        assert isqrt(BigInt("99999999")) == BigInt("9999")

    def test_negative_raises(self) -> None:
        with pytest.raises(NegativeArgument):
            isqrt(BigInt("-4"))


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


class TestQueries:
    """Тесты чётности и длины"""

    def test_parity(self) -> None:
        assert is_even(BigInt("10"))
        assert is_even(ZERO)
        assert is_odd(BigInt("-7"))
        assert not is_odd(BigInt("-8"))

    def test_integer_length(self) -> None:
        assert integer_length(ZERO) == 1
        assert integer_length(BigInt("-12345")) == 5
