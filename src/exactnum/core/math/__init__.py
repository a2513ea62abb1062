"""
Core math modules для exactnum

Алгоритмы уровня цифр над десятичными магнитудами.
Теоретико-числовые функции (number_theory) импортируются напрямую
из exactnum.core.math.number_theory, так как зависят от BigInt.
"""

# Digits (магнитуды)
from exactnum.core.math.digits import (
    INT_CHUNK_DIGITS,
    MAGNITUDE_PATTERN,
    ONE_MAGNITUDE,
    ZERO_MAGNITUDE,
    add_magnitudes,
    compare_magnitudes,
    divmod_magnitudes,
    magnitude_from_int,
    magnitude_to_int,
    multiply_magnitudes,
    multiply_small,
    parse_literal,
    shift_magnitude,
    subtract_magnitudes,
    trim_leading_zeros,
)

__all__ = [
    # Constants
    "INT_CHUNK_DIGITS",
    "MAGNITUDE_PATTERN",
    "ONE_MAGNITUDE",
    "ZERO_MAGNITUDE",
    # Functions
    "add_magnitudes",
    "compare_magnitudes",
    "divmod_magnitudes",
    "magnitude_from_int",
    "magnitude_to_int",
    "multiply_magnitudes",
    "multiply_small",
    "parse_literal",
    "shift_magnitude",
    "subtract_magnitudes",
    "trim_leading_zeros",
]
