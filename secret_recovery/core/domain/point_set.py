"""
PointSet — Упорядоченный набор точек с порогом k

Immutable Pydantic модель. Точки всегда хранятся отсортированными
по возрастанию x (стабильная сортировка), интерполяция использует
ровно первые k из них; избыточные точки игнорируются.
"""

from pydantic import BaseModel, Field, field_validator

from secret_recovery.config import InterpolationConfig
from secret_recovery.core.domain.point import Point
from secret_recovery.core.errors import InsufficientPointsError
from secret_recovery.core.math.lagrange import reconstruct_at_zero


class PointSet(BaseModel):
    """
    Набор точек для восстановления секрета.

    Инвариант: threshold >= 1, points отсортированы по x.
    """

    threshold: int = Field(..., ge=1, description="Порог k (минимум точек)")
    points: tuple[Point, ...] = Field(default=(), description="Точки, по возрастанию x")

    model_config = {"frozen": True}

    @field_validator("points")
    @classmethod
    def sort_by_x(cls, v: tuple[Point, ...]) -> tuple[Point, ...]:
        """Сортировка по x делает выбор подмножества детерминированным."""
        return tuple(sorted(v, key=lambda p: p.x))

    @property
    def degree(self) -> int:
        """Степень восстанавливаемого полинома m = k - 1."""
        return self.threshold - 1

    def is_sufficient(self) -> bool:
        return len(self.points) >= self.threshold

    def selected(self) -> tuple[Point, ...]:
        """
        Первые k точек по возрастанию x.

        Raises:
            InsufficientPointsError: если точек меньше порога
        """
        if not self.is_sufficient():
            raise InsufficientPointsError(self.threshold, len(self.points))
        return self.points[: self.threshold]

    def reconstruct_secret(self, config: InterpolationConfig | None = None) -> int:
        """
        Восстановление f(0) по первым k точкам.

        Raises:
            InsufficientPointsError: если точек меньше порога
            ZeroDenominatorError: совпадающие x среди выбранных точек
            NonIntegerResultError: точки не лежат на целочисленном полиноме
        """
        pairs = [p.as_pair() for p in self.selected()]
        return reconstruct_at_zero(pairs, self.threshold, config)
