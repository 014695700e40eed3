"""
Config — Параметры восстановления секрета

Константы уровня модуля и frozen dataclass конфигурации интерполяции.
Значения по умолчанию переопределяются флагами CLI.
"""

from dataclasses import dataclass
from typing import Final

# =============================================================================
# СИСТЕМЫ СЧИСЛЕНИЯ
# =============================================================================

# Допустимый диапазон оснований для значений долей
MIN_BASE: Final[int] = 2
MAX_BASE: Final[int] = 36

# =============================================================================
# CLI / ОТЧЁТ
# =============================================================================

# Заголовок отчёта, когда документ читается из stdin
DEFAULT_STDIN_TITLE: Final[str] = "Test Case"

# Уровень логирования по умолчанию
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"


@dataclass(frozen=True)
class InterpolationConfig:
    """Конфигурация интерполяции Лагранжа.

    reduce_intermediate: сокращать num/den базисного веса на gcd после
    каждого умножения. Не влияет на результат, только на размер
    промежуточных чисел.
    """
    reduce_intermediate: bool = True
