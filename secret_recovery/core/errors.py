"""
Errors — Таксономия ошибок восстановления секрета

Все ошибки ядра наследуются от SecretRecoveryError и являются локальными:
ядро не делает повторных попыток и не имеет частичного состояния.
Перехват и формирование диагностики — ответственность вызывающего (CLI).
"""


class SecretRecoveryError(Exception):
    """Базовый класс всех ошибок восстановления секрета."""


# =============================================================================
# DECODING
# =============================================================================


class DecodingError(SecretRecoveryError):
    """Ошибка разбора строки цифр в заданной системе счисления."""


class InvalidDigitError(DecodingError):
    """Символ вне алфавита [0-9a-z] (и не пробел)."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid digit: {char!r}")


class DigitOutOfRangeError(DecodingError):
    """Значение цифры не представимо в заданном основании (digit >= base)."""

    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"Digit {char!r} out of range for base {base}")


# =============================================================================
# RATIONAL ARITHMETIC
# =============================================================================


class ZeroDenominatorError(SecretRecoveryError, ZeroDivisionError):
    """
    Попытка построить дробь с нулевым знаменателем.

    Возникает при прямом неверном использовании Fraction либо при
    совпадающих x-координатах среди выбранных точек.
    """


class NonIntegerResultError(SecretRecoveryError):
    """
    Итоговая дробь не является целым числом.

    Означает, что точки не лежат на полиноме степени <= k-1
    с целым свободным членом (повреждённый или подменённый ввод).
    """

    # Порог в битах, выше которого значения описываются размером, а не цифрами
    MAX_FORMATTED_BITS = 4096

    def __init__(self, numerator: int, denominator: int):
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(f"Non-integer result: {_describe_ratio(numerator, denominator)}")


def _describe_ratio(numerator: int, denominator: int) -> str:
    """
    Текст дроби для сообщения об ошибке.

    Большие значения не переводятся в десятичную строку (лимит
    int → str в Python 3.11+), вместо этого указывается размер в битах.
    """
    limit = NonIntegerResultError.MAX_FORMATTED_BITS
    if numerator.bit_length() <= limit and denominator.bit_length() <= limit:
        return f"{numerator}/{denominator}"
    sign = "-" if numerator < 0 else ""
    return (
        f"{sign}<{numerator.bit_length()}-bit numerator>"
        f"/<{denominator.bit_length()}-bit denominator>"
    )


# =============================================================================
# POINT SELECTION
# =============================================================================


class InsufficientPointsError(SecretRecoveryError):
    """Доступно меньше точек, чем порог k."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(
            f"Interpolation requires {required} points, but only {available} were provided."
        )


class ShareDocumentError(SecretRecoveryError):
    """Документ с долями не является валидным JSON или нарушает контракт."""
