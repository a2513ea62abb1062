"""
exactnum — точная арифметика над целыми и рациональными числами
неограниченной разрядности в десятичном представлении.

Публичный API:
- BigInt, BigFrac и константы ZERO/ONE/TWO/F_ZERO/F_ONE
- теоретико-числовые функции (factorial, gcd, lcm, isqrt, ...)
- harmonic
- иерархия исключений
"""

from exactnum.core.config import DEFAULT_APPROX_CONFIG, ApproxConfig
from exactnum.core.domain import (
    F_ONE,
    F_ZERO,
    ONE,
    TWO,
    ZERO,
    BigFrac,
    BigInt,
    harmonic,
)
from exactnum.core.errors import (
    DivisionByZero,
    ExactArithmeticError,
    IndeterminateForm,
    InvalidFormat,
    NegativeArgument,
    NegativeExponent,
)
from exactnum.core.functional import approx
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

__all__ = [
    # Types
    "BigInt",
    "BigFrac",
    # Constants
    "ZERO",
    "ONE",
    "TWO",
    "F_ZERO",
    "F_ONE",
    # Config
    "ApproxConfig",
    "DEFAULT_APPROX_CONFIG",
    # Errors
    "ExactArithmeticError",
    "InvalidFormat",
    "DivisionByZero",
    "NegativeArgument",
    "NegativeExponent",
    "IndeterminateForm",
    # Number theory
    "factorial",
    "fibonacci",
    "binomial",
    "gcd",
    "lcm",
    "isqrt",
    "is_even",
    "is_odd",
    "integer_length",
    "harmonic",
    "approx",
]
