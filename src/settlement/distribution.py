"""
Distribution — Квинтильное распределение популяции

Immutable Pydantic модель: пять диапазонов (Top, High, Median, Low, Bottom),
вычисленных один раз из размера популяции, и запрос группы по индексу.

Популяция должна быть отсортирована вызывающей стороной от высшего ранга
к низшему. Модель не хранит и не сортирует саму популяцию.
"""

import logging

from pydantic import BaseModel, Field, model_validator

from src.core.domain.quintile import Group, PartitionStrategy, Range
from src.core.math.partition import POPULATION_COUNT_MAX, partition

logger = logging.getLogger(__name__)


class Distribution(BaseModel):
    """
    Разбиение популяции на квинтильные группы.

    Построение: Distribution.from_population_count(N).
    Для N = 0 непуст только Median = [0, 0] (сентинел); find_quintile(0)
    возвращает median, а не ошибку.
    """

    population_count: int = Field(
        ..., ge=0, le=POPULATION_COUNT_MAX, description="Размер популяции"
    )
    strategy: PartitionStrategy = Field(..., description="Выбранная стратегия разбиения")

    top: Range = Field(..., description="Диапазон группы top")
    high: Range = Field(..., description="Диапазон группы high")
    median: Range = Field(..., description="Диапазон группы median")
    low: Range = Field(..., description="Диапазон группы low")
    bottom: Range = Field(..., description="Диапазон группы bottom")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_partition_matches_count(self) -> "Distribution":
        """Проверка, что strategy и диапазоны совпадают с partition(population_count)"""
        strategy, breakdown = partition(self.population_count)

        if self.strategy != strategy:
            raise ValueError(
                f"strategy {self.strategy.value} does not match population_count "
                f"{self.population_count} (expected {strategy.value})"
            )

        for group, expected in zip(Group, breakdown):
            actual = getattr(self, group.value)
            if actual != expected:
                raise ValueError(
                    f"{group.value} range {actual} does not match population_count "
                    f"{self.population_count} (expected {expected})"
                )

        return self

    @classmethod
    def from_population_count(cls, population_count: int) -> "Distribution":
        """
        Построение распределения из размера популяции.

        Args:
            population_count: Размер популяции, 0..POPULATION_COUNT_MAX

        Returns:
            Distribution с пятью диапазонами

        Raises:
            ValueError: Если population_count вне допустимого домена
        """
        strategy, (top, high, median, low, bottom) = partition(population_count)

        logger.debug(
            "Quintile distribution built: population_count=%d strategy=%s",
            population_count,
            strategy.value,
        )

        return cls(
            population_count=population_count,
            strategy=strategy,
            top=top,
            high=high,
            median=median,
            low=low,
            bottom=bottom,
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def find_quintile(self, population_index: int) -> Group:
        """
        Определение квинтильной группы по индексу популяции.

        Порядок проверки: Median, Top, High, Low, иначе Bottom.
        Median проверяется первым: сентинел [0, 0] для N <= 1.
        Индексы вне [0, N-1] (включая отрицательные) попадают в Bottom,
        если их не захватил непустой диапазон раньше.
        """
        if self.median.is_member(population_index):
            return Group.MEDIAN
        if self.top.is_member(population_index):
            return Group.TOP
        if self.high.is_member(population_index):
            return Group.HIGH
        if self.low.is_member(population_index):
            return Group.LOW
        return Group.BOTTOM

    def range_of(self, group: Group) -> Range:
        """
        Диапазон заданной группы.

        Args:
            group: Group или её строковое значение ("top", "high", ...)

        Returns:
            Range группы

        Raises:
            ValueError: Если group не является значением Group
        """
        return getattr(self, Group(group).value)

    def ranges(self) -> dict[Group, Range]:
        """Диапазоны всех групп в порядке Top → Bottom."""
        return {group: self.range_of(group) for group in Group}

    def group_sizes(self) -> dict[Group, int]:
        return {group: group_range.size for group, group_range in self.ranges().items()}

    def groups(self) -> list[Group]:
        """
        Группа каждого члена популяции по порядку индексов.

        Returns:
            [find_quintile(i) for i in 0..N-1] (пустой список для N = 0)
        """
        return [self.find_quintile(index) for index in range(self.population_count)]


def build_distribution(population_count: int) -> Distribution:
    """Удобная обёртка над Distribution.from_population_count."""
    return Distribution.from_population_count(population_count)
