"""
BigFrac — Точная рациональная дробь

Immutable Pydantic модель дроби numerator / denominator из двух BigInt.
Построена целиком поверх BigInt: умножение, gcd и деление.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. denominator != 0 и denominator > 0 (знак хранится только в числителе)
2. gcd(|numerator|, |denominator|) == 1 после каждого создания и каждой операции
3. Значения неизменяемы

Сложение и вычитание используют произведение знаменателей как общий
знаменатель (не НОК), после чего результат сокращается.
"""

import logging
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from exactnum.core.config import DEFAULT_APPROX_CONFIG, ApproxConfig
from exactnum.core.domain.integer import ONE, ZERO, BigInt
from exactnum.core.errors import DivisionByZero, IndeterminateForm, NegativeArgument
from exactnum.core.math import number_theory

logger = logging.getLogger(__name__)


# =============================================================================
# BIGFRAC MODEL
# =============================================================================


class BigFrac(BaseModel):
    """
    Рациональное число в несократимой форме.

    Создание: BigFrac(numerator, denominator) — каждый аргумент BigInt,
    десятичный литерал или int; denominator по умолчанию 1.
    Конструктор сокращает дробь и переносит знак в числитель.
    """

    numerator: BigInt = Field(ZERO, description="Числитель (несёт знак дроби)")
    denominator: BigInt = Field(ONE, description="Знаменатель (всегда > 0)")

    model_config = {"frozen": True}

    def __init__(self, numerator: Any = ZERO, denominator: Any = ONE) -> None:
        num, den = _reduce(_to_integer(numerator), _to_integer(denominator))
        super().__init__(numerator=num, denominator=den)

    @model_validator(mode="after")
    def validate_denominator(self) -> "BigFrac":
        """Проверка, что знаменатель строго положительный"""
        if self.denominator.is_zero:
            raise ValueError("denominator must be non-zero")
        if self.denominator.negative:
            raise ValueError("denominator must be positive")
        return self

    @classmethod
    def _from_parts(cls, numerator: BigInt, denominator: BigInt) -> "BigFrac":
        # Пара уже сокращена и нормализована по знаку
        return cls.model_construct(numerator=numerator, denominator=denominator)

    @property
    def is_zero(self) -> bool:
        return self.numerator.is_zero

    def approx(self, config: ApproxConfig | None = None) -> str:
        """
        Приближение в научной нотации через double.

        НЕТОЧНАЯ операция для отображения: ведущие цифры числителя
        и знаменателя (config.fraction_digits) переводятся в float,
        мантисса = float(num) / float(den), при мантиссе < 1 она
        умножается на 10, а порядок уменьшается на 1.

        Args:
            config: Параметры отображения (default: DEFAULT_APPROX_CONFIG)

        Returns:
            Строка вида "<mantissa> x 10 ^ <exponent>"

        Examples:
            >>> BigFrac(1, 2).approx()
            '5 x 10 ^ -1'
            >>> BigFrac(-3, 2).approx()
            '-1.5 x 10 ^ 0'
        """
        config = config or DEFAULT_APPROX_CONFIG
        logger.debug("approx of %s is a lossy float display", self)

        if self.numerator.is_zero:
            return "0 x 10 ^ 0"

        num = self.numerator.magnitude
        den = self.denominator.magnitude
        exponent = (len(num) - 1) - (len(den) - 1)

        mantissa = _leading_float(num, config.fraction_digits) / _leading_float(
            den, config.fraction_digits
        )
        if mantissa < 1.0:
            mantissa *= 10.0
            exponent -= 1

        sign = "-" if self.numerator.negative else ""
        return f"{sign}{mantissa:.{config.fraction_precision}g} x 10 ^ {exponent}"

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.numerator} / {self.denominator}"

    def __repr__(self) -> str:
        return f"BigFrac('{self.numerator}', '{self.denominator}')"

    def __bool__(self) -> bool:
        return not self.is_zero

    def __hash__(self) -> int:
        # Целая дробь равна своему числителю и хэшируется так же
        if self.denominator == ONE:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigFrac":
        return BigFrac._from_parts(-self.numerator, self.denominator)

    def __pos__(self) -> "BigFrac":
        return self

    def __abs__(self) -> "BigFrac":
        return BigFrac._from_parts(abs(self.numerator), self.denominator)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return BigFrac(
            self.numerator * y.denominator + y.numerator * self.denominator,
            self.denominator * y.denominator,
        )

    def __radd__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y + self

    def __sub__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return BigFrac(
            self.numerator * y.denominator - y.numerator * self.denominator,
            self.denominator * y.denominator,
        )

    def __rsub__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y - self

    def __mul__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return BigFrac(self.numerator * y.numerator, self.denominator * y.denominator)

    def __rmul__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y * self

    def __truediv__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        if y.numerator.is_zero:
            raise DivisionByZero("Division by zero")
        return BigFrac(self.numerator * y.denominator, self.denominator * y.numerator)

    def __rtruediv__(self, other: Any) -> "BigFrac":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y / self

    def __pow__(self, exponent: Any) -> "BigFrac":
        """
        Возведение в целую степень (в том числе отрицательную).

        Числитель и знаменатель умножаются сами на себя |exponent| раз;
        при отрицательной степени они меняются местами.

        Raises:
            IndeterminateForm: 0 ** 0
            DivisionByZero: 0 ** (отрицательная степень)
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if self.numerator.is_zero:
            if exponent == 0:
                raise IndeterminateForm("Indeterminate expression 0^0 encountered")
            if exponent < 0:
                raise DivisionByZero("Division by zero")
        if exponent == 0:
            return F_ONE

        num, den = self.numerator, self.denominator
        for _ in range(abs(exponent) - 1):
            num = num * self.numerator
            den = den * self.denominator
        if exponent < 0:
            num, den = den, num

        # Конструктор переносит знак из знаменателя после перестановки
        return BigFrac(num, den)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return self.numerator == y.numerator and self.denominator == y.denominator

    def __ne__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return not self == y

    def __lt__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _compare(self, y) < 0

    def __le__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _compare(self, y) <= 0

    def __gt__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _compare(self, y) > 0

    def __ge__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _compare(self, y) >= 0


# =============================================================================
# HELPERS
# =============================================================================


def _to_integer(value: Any) -> BigInt:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return BigInt(value)
    if isinstance(value, dict):
        # Путь model_validate: поля BigInt в виде словаря
        return BigInt.model_validate(value)
    raise TypeError(f"expected BigInt, str or int, got {type(value).__name__}")


def _coerce(value: Any) -> BigFrac | None:
    if isinstance(value, BigFrac):
        return value
    if isinstance(value, BigInt):
        return BigFrac._from_parts(value, ONE)
    if isinstance(value, int) and not isinstance(value, bool):
        return BigFrac._from_parts(BigInt.from_int(value), ONE)
    return None


def _reduce(numerator: BigInt, denominator: BigInt) -> tuple[BigInt, BigInt]:
    """
    Сокращение дроби и нормализация знака.

    Делит обе части на gcd(|num|, |den|) и переносит знак знаменателя
    в числитель.

    Raises:
        DivisionByZero: Если знаменатель равен 0
    """
    if denominator.is_zero:
        raise DivisionByZero("Division by zero")

    g = number_theory.gcd(numerator, denominator)
    if g != ONE:
        numerator = numerator / g
        denominator = denominator / g

    if denominator.negative:
        numerator, denominator = -numerator, -denominator
    return numerator, denominator


def _compare(x: BigFrac, y: BigFrac) -> int:
    xn, yn = x.numerator, y.numerator

    # Разные знаки решают сразу
    if not xn.negative and yn.negative:
        return 1
    if xn.negative and not yn.negative:
        return -1

    if x.denominator == y.denominator:
        left, right = xn, yn
    else:
        # Знаменатели положительны: перекрёстное умножение сохраняет порядок
        left, right = xn * y.denominator, yn * x.denominator

    if left == right:
        return 0
    return -1 if left < right else 1


def _leading_float(magnitude: str, digits: int) -> float:
    head = magnitude[:digits]
    return float(f"{head[0]}.{head[1:]}")


# =============================================================================
# HARMONIC
# =============================================================================


def harmonic(n: int) -> BigFrac:
    """
    Гармоническое число H(n) = 1 + 1/2 + ... + 1/n.

    Накопление повторным сложением единичных дробей; H(0) = 0.

    Raises:
        NegativeArgument: Если n < 0

    Examples:
        >>> str(harmonic(3))
        '11 / 6'
    """
    if n < 0:
        raise NegativeArgument(f"Harmonic number of a negative integer: {n}")
    if n == 0:
        return F_ZERO

    logger.debug("harmonic(%d) started", n)
    total = F_ONE
    for i in range(2, n + 1):
        total = total + BigFrac._from_parts(ONE, BigInt.from_int(i))
    logger.debug("harmonic(%d) finished: %s", n, total)
    return total


# =============================================================================
# CONSTANTS
# =============================================================================

F_ZERO: Final[BigFrac] = BigFrac._from_parts(ZERO, ONE)
F_ONE: Final[BigFrac] = BigFrac._from_parts(ONE, ONE)
