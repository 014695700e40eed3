"""
Base Decoding — Разбор строки цифр в системе счисления 2..36

Позиционная запись, старший разряд первым:
    result = result * base + digit_value

Алфавит: '0'-'9' → 0..9, 'a'-'z' → 10..35 (после приведения к нижнему регистру).
Внутренние пробелы пропускаются. Знак не поддерживается: результат >= 0.
"""

from secret_recovery.config import MAX_BASE, MIN_BASE
from secret_recovery.core.errors import DigitOutOfRangeError, InvalidDigitError


def digit_value(ch: str) -> int | None:
    """
    Значение одиночного символа-цифры.

    Args:
        ch: Символ в нижнем регистре

    Returns:
        0..35 для символов из [0-9a-z], иначе None

    Examples:
        >>> digit_value("7")
        7
        >>> digit_value("z")
        35
        >>> digit_value("#") is None
        True
    """
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "a" <= ch <= "z":
        return 10 + ord(ch) - ord("a")
    return None


def decode(digits: str, base: int) -> int:
    """
    Декодирование строки цифр в целое число.

    Args:
        digits: Строка цифр (обрезается и приводится к нижнему регистру)
        base: Основание системы счисления в [MIN_BASE, MAX_BASE]

    Returns:
        Неотрицательное целое; пустая строка даёт 0

    Raises:
        ValueError: если base вне [2, 36]
        InvalidDigitError: символ вне [0-9a-z] и не пробел
        DigitOutOfRangeError: значение цифры >= base

    Examples:
        >>> decode("ff", 16)
        255
        >>> decode("111", 2)
        7
        >>> decode("Z", 36)
        35
    """
    if not (MIN_BASE <= base <= MAX_BASE):
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")

    result = 0
    for ch in digits.strip().lower():
        if ch == " ":
            continue
        value = digit_value(ch)
        if value is None:
            raise InvalidDigitError(ch)
        if value >= base:
            raise DigitOutOfRangeError(ch, base)
        result = result * base + value
    return result
