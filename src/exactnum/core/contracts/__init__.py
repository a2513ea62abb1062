"""
Contract Validation Module

Модуль для валидации JSON-представлений чисел exactnum.
"""

from .validators import (
    BigFracValidator,
    BigIntValidator,
    ContractValidator,
    SchemaLoader,
    big_frac_from_payload,
    big_frac_to_payload,
    big_int_from_payload,
    big_int_to_payload,
    validate_big_frac,
    validate_big_int,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "BigIntValidator",
    "BigFracValidator",
    # Functions
    "validate_big_int",
    "validate_big_frac",
    "big_int_to_payload",
    "big_int_from_payload",
    "big_frac_to_payload",
    "big_frac_from_payload",
]
