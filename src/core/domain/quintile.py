"""
Quintile — Группы квинтилей и диапазоны членства

Базовые value-типы для разбиения ранжированной популяции на пять групп:
- Group: метка группы (top/high/median/low/bottom)
- PartitionStrategy: стратегия, выбранная при построении распределения
- Range: закрытый интервал индексов популяции [first, last]

Популяция отсортирована от высшего ранга к низшему (индекс 0 = высший ранг).
Range с first > last — пустой диапазон (группа без членов).
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Количество квинтильных групп
GROUP_COUNT: Final[int] = 5


# =============================================================================
# ENUMS
# =============================================================================


class Group(str, Enum):
    """Квинтильная группа.

    Порядок объявления совпадает с позиционным порядком диапазонов
    (от высшего ранга к низшему).
    """

    TOP = "top"
    HIGH = "high"
    MEDIAN = "median"
    LOW = "low"
    BOTTOM = "bottom"


class PartitionStrategy(str, Enum):
    """Стратегия разбиения популяции.

    - IDEAL: N кратно 5 (включая N = 0)
    - SMALL: N in {1, 2, 3, 4}, табличное разбиение
    - UNBALANCED: N >= 6, N % 5 != 0
    """

    IDEAL = "ideal"
    SMALL = "small"
    UNBALANCED = "unbalanced"


# =============================================================================
# RANGE
# =============================================================================


class Range(BaseModel):
    """
    Диапазон членства квинтильной группы.

    Границы хранятся как есть, без валидации и clamping.
    first > last кодирует пустую группу.
    """

    first: int = Field(..., description="Индекс первого члена (включительно)")
    last: int = Field(..., description="Индекс последнего члена (включительно)")

    model_config = {"frozen": True}

    @classmethod
    def of(cls, first_member: int, last_member: int) -> "Range":
        """Позиционный конструктор: Range.of(0, 4)."""
        return cls(first=first_member, last=last_member)

    def is_member(self, population_index: int) -> bool:
        """
        Проверка, принадлежит ли индекс популяции диапазону.

        Args:
            population_index: Индекс в отсортированной популяции (любое целое)

        Returns:
            True если first <= population_index <= last
        """
        return self.first <= population_index <= self.last

    @property
    def is_empty(self) -> bool:
        return self.first > self.last

    @property
    def size(self) -> int:
        """Количество членов (0 для пустого диапазона)."""
        if self.is_empty:
            return 0
        return self.last - self.first + 1

    def __str__(self) -> str:
        if self.is_empty:
            return "empty"
        return f"[{self.first}, {self.last}]"


# Сентинел пустой группы
EMPTY_RANGE: Final[Range] = Range(first=0, last=-1)
