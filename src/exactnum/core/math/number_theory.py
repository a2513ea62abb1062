"""
Number Theory — Теоретико-числовые функции над BigInt

Функции построены поверх арифметики BigInt:
- factorial: специализированное скалярное умножение массива цифр
- gcd / lcm: алгоритм Евклида на модулях
- isqrt: итерация Ньютона с целочисленным делением
- fibonacci: итеративное попарное обновление
- binomial: через факториалы (намеренно простая формула)
- is_even / is_odd / integer_length: запросы к младшей цифре и длине

Аргументы-счётчики (n, k) принимаются как Python int.
"""

import logging

from exactnum.core.domain.integer import ONE, TWO, ZERO, BigInt
from exactnum.core.errors import NegativeArgument
from exactnum.core.math.digits import multiply_small

logger = logging.getLogger(__name__)


# =============================================================================
# FACTORIAL / FIBONACCI / BINOMIAL
# =============================================================================


def factorial(n: int) -> BigInt:
    """
    Факториал n!.

    Накопление идёт умножением массива цифр на малое целое i с переносом
    (multiply_small), без общего умножения BigInt * BigInt.

    Args:
        n: Неотрицательный int

    Returns:
        n! как BigInt (0! = 1)

    Raises:
        NegativeArgument: Если n < 0

    Examples:
        >>> str(factorial(5))
        '120'
    """
    if n < 0:
        raise NegativeArgument(f"Factorial of a negative integer: {n}")

    logger.debug("factorial(%d) started", n)
    magnitude = ONE.magnitude
    for i in range(2, n + 1):
        magnitude = multiply_small(magnitude, i)
    logger.debug("factorial(%d) finished: %d digits", n, len(magnitude))

    return BigInt._from_parts(False, magnitude)


def fibonacci(n: int) -> BigInt:
    """
    Число Фибоначчи F(n), F(0) = 0, F(1) = 1.

    Raises:
        NegativeArgument: Если n < 0
    """
    if n < 0:
        raise NegativeArgument(f"Fibonacci of a negative integer: {n}")
    if n == 0:
        return ZERO

    a, b = ZERO, ONE
    for _ in range(2, n + 1):
        a, b = b, a + b
    return b


def binomial(n: int, k: int) -> BigInt:
    """
    Биномиальный коэффициент C(n, k) = n! / k! / (n - k)!.

    Вне области определения (n < 0, k < 0, k > n) возвращает 0.
    """
    if n < 0 or k < 0 or k > n:
        return ZERO
    if n == k or k == 0:
        return ONE

    logger.debug("binomial(%d, %d) via factorials", n, k)
    return factorial(n) / factorial(k) / factorial(n - k)


# =============================================================================
# GCD / LCM
# =============================================================================


def gcd(x: BigInt, y: BigInt) -> BigInt:
    """
    Наибольший общий делитель (алгоритм Евклида на модулях).

    gcd(0, 0) = 0, gcd(x, 0) = |x|. Результат всегда неотрицательный.

    Examples:
        >>> str(gcd(BigInt("48"), BigInt("18")))
        '6'
    """
    a, b = abs(x), abs(y)
    while not b.is_zero:
        a, b = b, a % b
    return a


def lcm(x: BigInt, y: BigInt) -> BigInt:
    """
    Наименьшее общее кратное: |y| * (|x| / gcd(x, y)).

    Если хотя бы один операнд равен 0 — возвращает 0.
    """
    if x.is_zero or y.is_zero:
        return ZERO
    return abs(y) * (abs(x) / gcd(x, y))


# =============================================================================
# ISQRT
# =============================================================================


def isqrt(x: BigInt) -> BigInt:
    """
    Целочисленный квадратный корень floor(sqrt(x)).

    Итерация Ньютона: x1 = (x0 + x / x0) / 2, пока x1 < x0.
    Стартовое приближение x0 = x / 2.

    Raises:
        NegativeArgument: Если x < 0
    """
    if x.negative:
        raise NegativeArgument(f"Integer square root of a negative integer: {x}")
    if x.magnitude in ("0", "1"):
        return x

    x0 = x / TWO
    x1 = (x0 + x / x0) / TWO
    iterations = 1
    while x1 < x0:
        x0 = x1
        x1 = (x0 + x / x0) / TWO
        iterations += 1

    logger.debug("isqrt converged after %d iterations", iterations)
    return x0


# =============================================================================
# ЗАПРОСЫ
# =============================================================================


def is_even(x: BigInt) -> bool:
    """Чётность по младшей цифре магнитуды."""
    return int(x.magnitude[-1]) % 2 == 0


def is_odd(x: BigInt) -> bool:
    """Нечётность: отрицание is_even."""
    return not is_even(x)


def integer_length(x: BigInt) -> int:
    """Количество десятичных цифр модуля (для нуля — 1)."""
    return len(x.magnitude)
