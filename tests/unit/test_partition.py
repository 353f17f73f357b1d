"""
Тесты для разбиения популяции на квинтили (src.core.math.partition)

Покрытие:
- Выбор стратегии (first-match-wins, N = 0 → IDEAL)
- IDEAL: равные блоки, вырожденный случай N = 0
- SMALL: табличные значения N = 0..4
- UNBALANCED: распределение остатка, сдвиг последующих групп
- Свойства покрытия [0, N-1] без пропусков и пересечений
- Валидация population_count
"""

import pytest

from src.core.domain import EMPTY_RANGE, GROUP_COUNT, PartitionStrategy, Range
from src.core.math import (
    POPULATION_COUNT_MAX,
    SMALL_POPULATION_TABLE,
    UNBALANCED_GROWTH,
    partition,
    partition_ideal,
    partition_small,
    partition_unbalanced,
    select_strategy,
    validate_population_count,
)


def assert_contiguous_cover(breakdown, population_count: int) -> None:
    """Helper: непустые диапазоны покрывают [0, N-1] подряд без пересечений."""
    non_empty = [r for r in breakdown if not r.is_empty]
    assert non_empty, "at least one non-empty range expected"
    assert non_empty[0].first == 0
    for previous, current in zip(non_empty, non_empty[1:]):
        assert current.first == previous.last + 1
    assert non_empty[-1].last == population_count - 1
    assert sum(r.size for r in breakdown) == population_count


# =============================================================================
# ТЕСТЫ: Strategy dispatch
# =============================================================================


class TestSelectStrategy:
    """Тесты для select_strategy"""

    def test_zero_routes_to_ideal(self) -> None:
        """N = 0 кратно 5 → IDEAL, а не SMALL"""
        assert select_strategy(0) == PartitionStrategy.IDEAL

    @pytest.mark.parametrize("population_count", [1, 2, 3, 4])
    def test_small(self, population_count: int) -> None:
        assert select_strategy(population_count) == PartitionStrategy.SMALL

    @pytest.mark.parametrize("population_count", [5, 10, 15, 100, 65535])
    def test_ideal(self, population_count: int) -> None:
        assert select_strategy(population_count) == PartitionStrategy.IDEAL

    @pytest.mark.parametrize("population_count", [6, 7, 8, 9, 11, 99, 65534])
    def test_unbalanced(self, population_count: int) -> None:
        assert select_strategy(population_count) == PartitionStrategy.UNBALANCED

    def test_partition_reports_strategy(self) -> None:
        strategy, breakdown = partition(7)
        assert strategy == PartitionStrategy.UNBALANCED
        assert breakdown == partition_unbalanced(7)


# =============================================================================
# ТЕСТЫ: IDEAL
# =============================================================================


class TestPartitionIdeal:
    """Тесты для partition_ideal"""

    def test_n5(self) -> None:
        assert partition_ideal(5) == tuple(Range.of(i, i) for i in range(5))

    def test_n10(self) -> None:
        assert partition_ideal(10) == (
            Range.of(0, 1),
            Range.of(2, 3),
            Range.of(4, 5),
            Range.of(6, 7),
            Range.of(8, 9),
        )

    def test_n15(self) -> None:
        assert partition_ideal(15) == (
            Range.of(0, 2),
            Range.of(3, 5),
            Range.of(6, 8),
            Range.of(9, 11),
            Range.of(12, 14),
        )

    def test_n0_degenerate_keeps_median_sentinel(self) -> None:
        """N = 0: формулы вырождаются, Median = [0, 0] сохраняется явно"""
        top, high, median, low, bottom = partition_ideal(0)
        assert median == Range.of(0, 0)
        assert all(r.is_empty for r in (top, high, low, bottom))
        assert partition_ideal(0) == SMALL_POPULATION_TABLE[0]

    @pytest.mark.parametrize("population_count", range(5, 501, 5))
    def test_equal_width_cover(self, population_count: int) -> None:
        """N кратно 5: равные блоки ширины N/5, покрытие [0, N-1]"""
        breakdown = partition_ideal(population_count)
        assert all(r.size == population_count // GROUP_COUNT for r in breakdown)
        assert_contiguous_cover(breakdown, population_count)

    def test_rejects_non_multiple(self) -> None:
        with pytest.raises(ValueError, match="N % 5 == 0"):
            partition_ideal(7)


# =============================================================================
# ТЕСТЫ: SMALL
# =============================================================================


class TestPartitionSmall:
    """Тесты для partition_small (табличные значения)"""

    def test_n1_only_median(self) -> None:
        assert partition_small(1) == (
            EMPTY_RANGE,
            EMPTY_RANGE,
            Range.of(0, 0),
            EMPTY_RANGE,
            EMPTY_RANGE,
        )

    def test_n2_high_low(self) -> None:
        assert partition_small(2) == (
            EMPTY_RANGE,
            Range.of(0, 0),
            EMPTY_RANGE,
            Range.of(1, 1),
            EMPTY_RANGE,
        )

    def test_n3_high_median_low(self) -> None:
        assert partition_small(3) == (
            EMPTY_RANGE,
            Range.of(0, 0),
            Range.of(1, 1),
            Range.of(2, 2),
            EMPTY_RANGE,
        )

    def test_n4_all_but_median(self) -> None:
        assert partition_small(4) == (
            Range.of(0, 0),
            Range.of(1, 1),
            EMPTY_RANGE,
            Range.of(2, 2),
            Range.of(3, 3),
        )

    @pytest.mark.parametrize("population_count", [1, 2, 3, 4])
    def test_cover(self, population_count: int) -> None:
        assert_contiguous_cover(partition_small(population_count), population_count)

    def test_rejects_large(self) -> None:
        with pytest.raises(ValueError, match="Small partition"):
            partition_small(5)


# =============================================================================
# ТЕСТЫ: UNBALANCED
# =============================================================================


class TestPartitionUnbalanced:
    """Тесты для partition_unbalanced"""

    def test_n6_median_grows(self) -> None:
        """extra=1: Median +1"""
        assert partition_unbalanced(6) == (
            Range.of(0, 0),
            Range.of(1, 1),
            Range.of(2, 3),
            Range.of(4, 4),
            Range.of(5, 5),
        )

    def test_n7_high_low_grow(self) -> None:
        """extra=2: High +1, Low +1"""
        assert partition_unbalanced(7) == (
            Range.of(0, 0),
            Range.of(1, 2),
            Range.of(3, 3),
            Range.of(4, 5),
            Range.of(6, 6),
        )

    def test_n8_inner_groups_grow(self) -> None:
        """extra=3: High +1, Median +1, Low +1"""
        assert partition_unbalanced(8) == (
            Range.of(0, 0),
            Range.of(1, 2),
            Range.of(3, 4),
            Range.of(5, 6),
            Range.of(7, 7),
        )

    def test_n9_high_low_grow_twice(self) -> None:
        """extra=4: High +2, Low +2"""
        assert partition_unbalanced(9) == (
            Range.of(0, 0),
            Range.of(1, 3),
            Range.of(4, 4),
            Range.of(5, 7),
            Range.of(8, 8),
        )

    def test_n23(self) -> None:
        """extra=3, size=4"""
        assert partition_unbalanced(23) == (
            Range.of(0, 3),
            Range.of(4, 8),
            Range.of(9, 13),
            Range.of(14, 18),
            Range.of(19, 22),
        )

    @pytest.mark.parametrize(
        "population_count",
        [n for n in range(6, 501) if n % GROUP_COUNT != 0] + [65534, 65531],
    )
    def test_cover_and_growth(self, population_count: int) -> None:
        """Покрытие [0, N-1]; прирост сверх базовой ширины равен N % 5"""
        breakdown = partition_unbalanced(population_count)
        size = population_count // GROUP_COUNT
        extra = population_count % GROUP_COUNT

        assert_contiguous_cover(breakdown, population_count)

        growth = tuple(r.size - size for r in breakdown)
        assert growth == UNBALANCED_GROWTH[extra]
        assert sum(growth) == extra

        top, _, _, _, bottom = breakdown
        assert top.size == size
        assert bottom.size == size
        assert bottom.last == population_count - 1

    @pytest.mark.parametrize("population_count", [0, 3, 10])
    def test_rejects_outside_domain(self, population_count: int) -> None:
        with pytest.raises(ValueError, match="Unbalanced partition"):
            partition_unbalanced(population_count)


# =============================================================================
# ТЕСТЫ: Validation
# =============================================================================


class TestValidatePopulationCount:
    """Тесты для validate_population_count"""

    @pytest.mark.parametrize("population_count", [0, 1, 5, POPULATION_COUNT_MAX])
    def test_accepts_domain(self, population_count: int) -> None:
        validate_population_count(population_count)

    def test_rejects_negative(self) -> None:
        with pytest.raises(ValueError, match=">= 0"):
            validate_population_count(-1)

    def test_rejects_above_max(self) -> None:
        with pytest.raises(ValueError, match="<= 65535"):
            validate_population_count(POPULATION_COUNT_MAX + 1)

    @pytest.mark.parametrize("population_count", [True, 5.0, "5", None])
    def test_rejects_non_integer(self, population_count) -> None:
        with pytest.raises(ValueError, match="must be an integer"):
            validate_population_count(population_count)

    def test_partition_validates(self) -> None:
        with pytest.raises(ValueError):
            partition(-5)
