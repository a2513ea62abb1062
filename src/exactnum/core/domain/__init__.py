"""
Domain value types.

BigInt — целое неограниченной разрядности, BigFrac — несократимая дробь.
"""

from exactnum.core.domain.integer import ONE, TWO, ZERO, BigInt
from exactnum.core.domain.fraction import F_ONE, F_ZERO, BigFrac, harmonic

__all__ = [
    # Integer
    "BigInt",
    "ZERO",
    "ONE",
    "TWO",
    # Fraction
    "BigFrac",
    "F_ZERO",
    "F_ONE",
    "harmonic",
]
