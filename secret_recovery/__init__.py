"""
secret_recovery — восстановление секрета пороговой схемы разделения

Точная интерполяция Лагранжа в точке x = 0 над рациональными числами
с целыми произвольной точности.
"""

from secret_recovery.core.errors import (
    DecodingError,
    DigitOutOfRangeError,
    InsufficientPointsError,
    InvalidDigitError,
    NonIntegerResultError,
    SecretRecoveryError,
    ShareDocumentError,
    ZeroDenominatorError,
)
from secret_recovery.core.math import Fraction, decode, reconstruct_at_zero

__version__ = "0.1.0"

__all__ = [
    # Errors
    "SecretRecoveryError",
    "DecodingError",
    "InvalidDigitError",
    "DigitOutOfRangeError",
    "ZeroDenominatorError",
    "NonIntegerResultError",
    "InsufficientPointsError",
    "ShareDocumentError",
    # Core
    "Fraction",
    "decode",
    "reconstruct_at_zero",
]
