"""
Fraction — Точная рациональная арифметика над int

Нормализованная дробь numerator/denominator:
- denominator > 0
- gcd(|numerator|, denominator) == 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Нормализация применяется при каждом создании (включая результаты add/multiply)
2. Значение неизменяемо после создания (frozen)
3. to_exact_integer() — единственный шлюз точности: не-целое → NonIntegerResultError
"""

from dataclasses import dataclass

from secret_recovery.core.errors import NonIntegerResultError, ZeroDenominatorError


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель (алгоритм Евклида) по модулям аргументов.

    gcd(0, b) == |b|, gcd(0, 0) == 0.
    """
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


@dataclass(frozen=True)
class Fraction:
    """
    Нормализованная рациональная дробь.

    Examples:
        >>> Fraction(4, -8)
        Fraction(numerator=-1, denominator=2)
        >>> Fraction(0, 5)
        Fraction(numerator=0, denominator=1)
    """

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        n, d = self.numerator, self.denominator
        if not isinstance(n, int) or not isinstance(d, int):
            raise TypeError(f"Fraction requires int operands, got {type(n).__name__}/{type(d).__name__}")
        if d == 0:
            raise ZeroDenominatorError("Zero denominator")

        if d < 0:
            n, d = -n, -d
        # d > 0, поэтому g >= 1
        g = gcd(n, d)
        object.__setattr__(self, "numerator", n // g)
        object.__setattr__(self, "denominator", d // g)

    @classmethod
    def from_int(cls, value: int) -> "Fraction":
        """Дробь value/1."""
        return cls(value, 1)

    def add(self, other: "Fraction") -> "Fraction":
        """
        Сумма дробей (перекрёстное умножение с последующей нормализацией).

        n = a.n * b.d + b.n * a.d, d = a.d * b.d
        """
        return Fraction(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
        )

    def multiply(self, other: "Fraction") -> "Fraction":
        """Произведение дробей: n = a.n * b.n, d = a.d * b.d."""
        return Fraction(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
        )

    def to_exact_integer(self) -> int:
        """
        Извлечение целого значения.

        Returns:
            numerator // denominator

        Raises:
            NonIntegerResultError: если numerator % denominator != 0
        """
        if self.numerator % self.denominator != 0:
            raise NonIntegerResultError(self.numerator, self.denominator)
        return self.numerator // self.denominator

    def __add__(self, other):
        if isinstance(other, int):
            other = Fraction.from_int(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __mul__(self, other):
        if isinstance(other, int):
            other = Fraction.from_int(other)
        if not isinstance(other, Fraction):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__
