"""
Point — Точка выборки полинома

Immutable Pydantic модель (x, y) над целыми произвольной точности.
"""

from pydantic import BaseModel, Field, StrictInt


class Point(BaseModel):
    """
    Точка (x, y) неизвестного полинома.

    Immutable модель (frozen=True). Различность x в пределах одного
    восстановления обеспечивает вызывающий.
    """

    x: StrictInt = Field(..., description="x-координата (метка доли)")
    y: StrictInt = Field(..., description="Значение полинома в x")

    model_config = {"frozen": True}

    def as_pair(self) -> tuple[int, int]:
        return (self.x, self.y)
