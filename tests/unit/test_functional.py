"""
Тесты для Functional API

Проверяет, что свободные функции совпадают с операторами
для BigInt и BigFrac, а также публичный реэкспорт пакета.
"""

import pytest

import exactnum
from exactnum.core.domain.fraction import BigFrac
from exactnum.core.domain.integer import BigInt
from exactnum.core.functional import (
    add,
    approx,
    divide,
    equal_q,
    greater_equal_q,
    greater_q,
    less_equal_q,
    less_q,
    minus,
    multiply,
    not_equal_q,
    power,
    remainder,
    subtract,
)


class TestArithmeticFunctions:
    """Тесты арифметических функций"""

    def test_integers(self) -> None:
        x, y = BigInt("7"), BigInt("-2")
        assert add(x, y) == BigInt("5")
        assert subtract(x, y) == BigInt("9")
        assert minus(x) == BigInt("-7")
        assert multiply(x, y) == BigInt("-14")
        assert divide(x, y) == BigInt("-3")
        assert remainder(x, y) == BigInt("1")
        assert power(y, 3) == BigInt("-8")

    def test_fractions(self) -> None:
        x, y = BigFrac(1, 2), BigFrac(1, 3)
        assert add(x, y) == BigFrac(5, 6)
        assert subtract(x, y) == BigFrac(1, 6)
        assert minus(x) == BigFrac(-1, 2)
        assert multiply(x, y) == BigFrac(1, 6)
        assert divide(x, y) == BigFrac(3, 2)
        assert power(x, -2) == BigFrac(4)


class TestPredicates:
    """Тесты предикатов сравнения"""

    def test_predicates(self) -> None:
        a, b = BigInt("3"), BigInt("5")
        assert equal_q(a, BigInt("3"))
        assert not_equal_q(a, b)
        assert less_q(a, b)
        assert less_equal_q(a, a)
        assert greater_q(b, a)
        assert greater_equal_q(b, b)

    def test_predicates_on_fractions(self) -> None:
        assert less_q(BigFrac(1, 3), BigFrac(1, 2))
        assert equal_q(BigFrac(2, 4), BigFrac(1, 2))


class TestApproxDispatch:
    """Тесты approx для обоих типов"""

    def test_integer(self) -> None:
        assert approx(BigInt("123456"), 3) == "1.23 x 10 ^ 5"

    def test_fraction(self) -> None:
        assert approx(BigFrac(1, 2)) == "5 x 10 ^ -1"

    def test_unsupported_type_raises(self) -> None:
        with pytest.raises(TypeError):
            approx(12)  # type: ignore[arg-type]


class TestPackageExports:
    """Тесты публичного API пакета"""

    def test_concrete_cases_via_top_level(self) -> None:
        assert exactnum.factorial(5) == exactnum.BigInt("120")
        assert exactnum.fibonacci(10) == exactnum.BigInt("55")
        assert exactnum.gcd(exactnum.BigInt("48"), exactnum.BigInt("18")) == exactnum.BigInt("6")
        assert exactnum.binomial(5, 2) == exactnum.BigInt("10")
        assert exactnum.harmonic(2) == exactnum.BigFrac(3, 2)

    def test_errors_exported(self) -> None:
        for error in (
            exactnum.InvalidFormat,
            exactnum.DivisionByZero,
            exactnum.NegativeArgument,
            exactnum.NegativeExponent,
            exactnum.IndeterminateForm,
        ):
            assert issubclass(error, exactnum.ExactArithmeticError)
