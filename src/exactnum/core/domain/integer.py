"""
BigInt — Целое число неограниченной разрядности

Immutable Pydantic модель знакового целого в десятичном представлении:
- negative: флаг знака
- magnitude: строка десятичных цифр, старший разряд первым

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. magnitude каноническая: непустая, только цифры, без ведущих нулей (кроме "0")
2. Нет отрицательного нуля: "0" всегда с negative=False
3. Значения неизменяемы, каждая операция возвращает новый экземпляр

Деление усекающее (к нулю): знак частного = XOR знаков операндов,
знак остатка = знак делимого, (x / y) * y + (x % y) == x.
Оператор // не определён, так как в Python он означает floor-деление.
"""

import sys
from typing import Any, Final

from pydantic import BaseModel, Field, model_validator

from exactnum.core.config import DEFAULT_APPROX_CONFIG, ApproxConfig
from exactnum.core.errors import DivisionByZero, IndeterminateForm, NegativeExponent
from exactnum.core.math.digits import (
    MAGNITUDE_PATTERN,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    magnitude_from_int,
    magnitude_to_int,
    multiply_magnitudes,
    parse_literal,
    subtract_magnitudes,
)


# =============================================================================
# BIGINT MODEL
# =============================================================================


class BigInt(BaseModel):
    """
    Знаковое целое неограниченной разрядности.

    Создание из литерала: BigInt("-123"), из int: BigInt(-123) или
    BigInt.from_int(-123). Прямое создание по полям
    BigInt(negative=True, magnitude="123") проходит валидацию Pydantic.

    Immutable модель (frozen=True): операторы +=, -= и т.д. перепривязывают
    переменную к новому значению.
    """

    negative: bool = Field(False, description="Знак (True для отрицательных)")
    magnitude: str = Field(
        ZERO_MAGNITUDE,
        pattern=MAGNITUDE_PATTERN,
        description="Десятичные цифры модуля, старший разряд первым",
    )

    model_config = {"frozen": True}

    def __init__(self, literal: str | int | None = None, /, **data: Any) -> None:
        if literal is not None:
            if data:
                raise TypeError("BigInt accepts either a literal or field keywords, not both")
            if isinstance(literal, bool):
                raise TypeError("BigInt cannot be built from bool")
            if isinstance(literal, int):
                negative, magnitude = literal < 0, magnitude_from_int(literal)
            else:
                negative, magnitude = parse_literal(literal)
            data = {"negative": negative, "magnitude": magnitude}
        super().__init__(**data)

    @model_validator(mode="after")
    def validate_canonical_zero(self) -> "BigInt":
        """Проверка отсутствия отрицательного нуля"""
        if self.negative and self.magnitude == ZERO_MAGNITUDE:
            raise ValueError("zero must not be negative")
        return self

    @classmethod
    def from_int(cls, value: int) -> "BigInt":
        """Создание из Python int."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"value must be int, got {type(value).__name__}")
        return cls._from_parts(value < 0, magnitude_from_int(value))

    @classmethod
    def _from_parts(cls, negative: bool, magnitude: str) -> "BigInt":
        # magnitude уже каноническая; знак нуля схлопывается
        return cls.model_construct(
            negative=negative and magnitude != ZERO_MAGNITUDE,
            magnitude=magnitude,
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def is_zero(self) -> bool:
        return self.magnitude == ZERO_MAGNITUDE

    def approx(self, n: int | None = None, config: ApproxConfig | None = None) -> str:
        """
        Научная нотация по первым n значащим цифрам.

        n ограничивается диапазоном [1, длина магнитуды]; завершающие нули
        мантиссы отбрасываются; десятичная точка ставится после первой
        цифры, если цифр больше одной. Порядок — истинный (длина - 1).

        Args:
            n: Число значащих цифр (default: config.integer_digits)
            config: Параметры отображения (default: DEFAULT_APPROX_CONFIG)

        Returns:
            Строка вида "<mantissa> x 10 ^ <exponent>"

        Examples:
            >>> BigInt("123456").approx(3)
            '1.23 x 10 ^ 5'
            >>> BigInt("-1000").approx()
            '-1 x 10 ^ 3'
        """
        config = config or DEFAULT_APPROX_CONFIG
        if n is None:
            n = config.integer_digits

        length = len(self.magnitude)
        mantissa = self.magnitude[: min(max(n, 1), length)]
        if mantissa != ZERO_MAGNITUDE:
            mantissa = mantissa.rstrip("0")
        if len(mantissa) > 1:
            mantissa = f"{mantissa[0]}.{mantissa[1:]}"

        sign = "-" if self.negative else ""
        return f"{sign}{mantissa} x 10 ^ {length - 1}"

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        if self.negative:
            return f"-{self.magnitude}"
        return self.magnitude

    def __repr__(self) -> str:
        return f"BigInt('{self}')"

    def __int__(self) -> int:
        value = magnitude_to_int(self.magnitude)
        return -value if self.negative else value

    def __bool__(self) -> bool:
        return not self.is_zero

    def __hash__(self) -> int:
        # Совпадает с hash(int(self)): модуль по sys.hash_info.modulus
        # без преобразования всей строки в int
        residue = 0
        for ch in self.magnitude:
            residue = (residue * 10 + int(ch)) % _HASH_MODULUS
        return hash(-residue if self.negative else residue)

    # -------------------------------------------------------------------------
    # Sign
    # -------------------------------------------------------------------------

    def __neg__(self) -> "BigInt":
        return BigInt._from_parts(not self.negative, self.magnitude)

    def __pos__(self) -> "BigInt":
        return self

    def __abs__(self) -> "BigInt":
        if not self.negative:
            return self
        return BigInt._from_parts(False, self.magnitude)

    # -------------------------------------------------------------------------
    # Addition / Subtraction
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        x = self

        # Разные знаки сводятся к вычитанию модулей
        if not x.negative and y.negative:
            return x - abs(y)
        if x.negative and not y.negative:
            return y - abs(x)

        # Одинаковые знаки: сумма модулей, знак общий
        return BigInt._from_parts(x.negative, add_magnitudes(x.magnitude, y.magnitude))

    def __radd__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y + self

    def __sub__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        x = self

        if not x.negative and y.negative:
            return x + abs(y)
        if x.negative and not y.negative:
            return -(abs(x) + y)
        if x.negative and y.negative:
            return abs(y) - abs(x)

        # Оба неотрицательны: из меньшего вычитаем с переворотом
        if compare_magnitudes(x.magnitude, y.magnitude) < 0:
            return -(y - x)
        return BigInt._from_parts(False, subtract_magnitudes(x.magnitude, y.magnitude))

    def __rsub__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y - self

    # -------------------------------------------------------------------------
    # Multiplication / Division
    # -------------------------------------------------------------------------

    def __mul__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        if self.is_zero or y.is_zero:
            return ZERO
        if self.magnitude == ONE_MAGNITUDE:
            return y if not self.negative else -y
        if y.magnitude == ONE_MAGNITUDE:
            return self if not y.negative else -self
        return BigInt._from_parts(
            self.negative != y.negative,
            multiply_magnitudes(self.magnitude, y.magnitude),
        )

    def __rmul__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return y * self

    def __divmod__(self, other: Any) -> tuple["BigInt", "BigInt"]:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(self, y)

    def __rdivmod__(self, other: Any) -> tuple["BigInt", "BigInt"]:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(y, self)

    def __truediv__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(self, y)[0]

    def __rtruediv__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(y, self)[0]

    def __mod__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(self, y)[1]

    def __rmod__(self, other: Any) -> "BigInt":
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return _truncated_divmod(y, self)[1]

    # -------------------------------------------------------------------------
    # Power
    # -------------------------------------------------------------------------

    def __pow__(self, exponent: Any) -> "BigInt":
        """
        Возведение в неотрицательную целую степень повторным умножением.

        Raises:
            NegativeExponent: exponent < 0
            IndeterminateForm: 0 ** 0
        """
        if isinstance(exponent, bool) or not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            raise NegativeExponent(f"Power is a negative integer: {exponent}")
        if self.is_zero:
            if exponent == 0:
                raise IndeterminateForm("Indeterminate expression 0^0 encountered")
            return ZERO
        if exponent == 0:
            return ONE

        result = self
        for _ in range(exponent - 1):
            result = result * self
        return result

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        y = _coerce(other)
        if y is None:
            return NotImplemented
        return self.negative == y.negative and self.magnitude == y.magnitude

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

_HASH_MODULUS: Final[int] = sys.hash_info.modulus


def _coerce(value: Any) -> BigInt | None:
    if isinstance(value, BigInt):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return BigInt.from_int(value)
    return None


def _compare(x: BigInt, y: BigInt) -> int:
    """
    Трёхзначное сравнение: -1, 0, +1.

    Разные знаки решают сразу; при одинаковых знаках сравниваются модули
    (длина, затем лексикографически), для отрицательных порядок обращается.
    """
    if not x.negative and y.negative:
        return 1
    if x.negative and not y.negative:
        return -1

    order = compare_magnitudes(x.magnitude, y.magnitude)
    if x.negative and y.negative:
        return -order
    return order


def _truncated_divmod(x: BigInt, y: BigInt) -> tuple[BigInt, BigInt]:
    if y.is_zero:
        raise DivisionByZero("Division by zero")
    if x.is_zero:
        return ZERO, ZERO

    quotient, remainder = divmod_magnitudes(x.magnitude, y.magnitude)
    return (
        BigInt._from_parts(x.negative != y.negative, quotient),
        BigInt._from_parts(x.negative, remainder),
    )


# =============================================================================
# CONSTANTS
# =============================================================================

ZERO: Final[BigInt] = BigInt("0")
ONE: Final[BigInt] = BigInt("1")
TWO: Final[BigInt] = BigInt("2")
