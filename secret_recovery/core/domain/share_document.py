"""
ShareDocument — Модель JSON документа с долями

Формат:
    {
      "keys": {"n": 4, "k": 3},
      "1": {"base": "10", "value": "4"},
      "2": {"base": "2", "value": "111"},
      ...
    }

Ключи верхнего уровня кроме "keys" — метки долей (x в десятичной записи).
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from secret_recovery.config import MAX_BASE, MIN_BASE
from secret_recovery.core.domain.point import Point
from secret_recovery.core.math.base_decoding import decode


class ShareKeys(BaseModel):
    """Параметры схемы: n (объявленное число долей) и k (порог)."""

    n: int = Field(..., ge=0, description="Объявленное количество долей")
    k: int = Field(..., ge=1, description="Порог восстановления")

    model_config = {"frozen": True}


class ShareEntry(BaseModel):
    """
    Одна доля: значение в виде строки цифр и основание системы счисления.

    base в JSON может быть строкой ("16") или числом (16).
    """

    base: int = Field(..., ge=MIN_BASE, le=MAX_BASE, description="Основание 2..36")
    value: str = Field(..., description="Строка цифр значения y")

    model_config = {"frozen": True}

    @field_validator("base", mode="before")
    @classmethod
    def parse_base(cls, v: Any) -> Any:
        """Строковое основание приводится к int."""
        if isinstance(v, str):
            stripped = v.strip()
            if not (stripped.isascii() and stripped.isdigit()):
                raise ValueError(f"base must be a decimal integer, got {v!r}")
            return int(stripped)
        return v

    def to_point(self, x: int) -> Point:
        """
        Декодирование значения в точку (x, y).

        Raises:
            InvalidDigitError, DigitOutOfRangeError: при невалидном value
        """
        return Point(x=x, y=decode(self.value, self.base))


class ShareDocument(BaseModel):
    """
    Документ с долями: keys + пары (метка, доля) в порядке документа.

    Метки хранятся как int (x-координаты). Совпадающие x ("9" и "09")
    сохраняются: если они попадут в первые k точек, ядро сообщит
    ZeroDenominatorError, избыточные дубликаты не мешают восстановлению.
    """

    keys: ShareKeys = Field(..., description="Параметры n и k")
    shares: tuple[tuple[int, ShareEntry], ...] = Field(default=(), description="(x, доля)")

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def split_shares(cls, data: Any) -> Any:
        """Все ключи верхнего уровня кроме 'keys' собираются в shares."""
        if not isinstance(data, dict) or "shares" in data:
            return data
        shares = []
        for label, entry in data.items():
            if label == "keys":
                continue
            try:
                x = int(label)
            except ValueError:
                raise ValueError(f"share label must be an integer, got {label!r}")
            shares.append((x, entry))
        return {"keys": data.get("keys"), "shares": tuple(shares)}

    @property
    def threshold(self) -> int:
        return self.keys.k

    def declared_count_matches(self) -> bool:
        """Совпадает ли keys.n с фактическим числом долей."""
        return self.keys.n == len(self.shares)

    def to_points(self) -> list[Point]:
        """Декодирование всех долей в точки (порядок документа)."""
        return [entry.to_point(x) for x, entry in self.shares]
