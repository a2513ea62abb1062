"""
Config — Параметры отображения приближений

Неизменяемые конфигурации с дефолтами. Передаются явно в функции approx,
глобального изменяемого состояния нет.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# DEFAULTS
# =============================================================================

# Количество значащих цифр в approx(BigInt) по умолчанию
APPROX_INTEGER_DIGITS_DEFAULT: Final[int] = 10

# Сколько ведущих цифр числителя/знаменателя попадает в double
# (17 цифр достаточно для однозначного представления IEEE 754 double)
APPROX_FRACTION_DIGITS_DEFAULT: Final[int] = 17

# Значащие цифры мантиссы при печати approx(BigFrac)
APPROX_FRACTION_PRECISION_DEFAULT: Final[int] = 16


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class ApproxConfig:
    """Конфигурация научной нотации для approx.

    Точная арифметика от этих параметров не зависит.
    """

    integer_digits: int = APPROX_INTEGER_DIGITS_DEFAULT
    fraction_digits: int = APPROX_FRACTION_DIGITS_DEFAULT
    fraction_precision: int = APPROX_FRACTION_PRECISION_DEFAULT

    def __post_init__(self) -> None:
        for name in ("integer_digits", "fraction_digits", "fraction_precision"):
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")


DEFAULT_APPROX_CONFIG: Final[ApproxConfig] = ApproxConfig()
