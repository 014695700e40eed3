"""
Core math modules

Точная арифметика и интерполяция без float.
"""

# Base decoding
from secret_recovery.core.math.base_decoding import decode, digit_value

# Rational arithmetic
from secret_recovery.core.math.fraction import Fraction, gcd

# Lagrange interpolation
from secret_recovery.core.math.lagrange import basis_weight_at_zero, reconstruct_at_zero

__all__ = [
    # Base decoding
    "decode",
    "digit_value",
    # Rational arithmetic
    "Fraction",
    "gcd",
    # Lagrange interpolation
    "basis_weight_at_zero",
    "reconstruct_at_zero",
]
