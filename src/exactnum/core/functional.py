"""
Functional API — Операции в виде свободных функций

Тонкие обёртки над операторами BigInt/BigFrac для кода,
который передаёт операции как значения (map, reduce, таблицы диспетчеризации).
"""

from typing import Union

from exactnum.core.config import ApproxConfig
from exactnum.core.domain.fraction import BigFrac
from exactnum.core.domain.integer import BigInt

Number = Union[BigInt, BigFrac]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add(x: Number, y: Number) -> Number:
    return x + y


def subtract(x: Number, y: Number) -> Number:
    return x - y


def minus(x: Number) -> Number:
    return -x


def multiply(x: Number, y: Number) -> Number:
    return x * y


def divide(x: Number, y: Number) -> Number:
    """Усекающее деление для BigInt, точное — для BigFrac."""
    return x / y


def remainder(x: BigInt, y: BigInt) -> BigInt:
    """Остаток усекающего деления (знак делимого)."""
    return x % y


def power(x: Number, exponent: int) -> Number:
    return x**exponent


def approx(x: Number, n: int | None = None, config: ApproxConfig | None = None) -> str:
    """
    Научная нотация для BigInt или BigFrac.

    Для BigInt n — число значащих цифр; для BigFrac n игнорируется,
    точность задаётся config.

    Raises:
        TypeError: Если x не BigInt и не BigFrac
    """
    if isinstance(x, BigInt):
        return x.approx(n, config)
    if isinstance(x, BigFrac):
        return x.approx(config)
    raise TypeError(f"approx expects BigInt or BigFrac, got {type(x).__name__}")


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def equal_q(x: Number, y: Number) -> bool:
    return x == y


def not_equal_q(x: Number, y: Number) -> bool:
    return x != y


def greater_q(x: Number, y: Number) -> bool:
    return x > y


def less_q(x: Number, y: Number) -> bool:
    return x < y


def greater_equal_q(x: Number, y: Number) -> bool:
    return x >= y


def less_equal_q(x: Number, y: Number) -> bool:
    return x <= y
