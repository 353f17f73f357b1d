"""
Partition — Разбиение ранжированной популяции на квинтили

Три стратегии, выбираемые один раз по размеру популяции N
(first-match-wins):
1. N % 5 == 0  → IDEAL (равные блоки по N/5, включая N = 0)
2. N < 5       → SMALL (фиксированная таблица для N = 1..4)
3. иначе       → UNBALANCED (базовые блоки N//5 + распределение остатка)

Все стратегии возвращают пять Range в порядке Top, High, Median, Low, Bottom.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Для N >= 1 непустые диапазоны покрывают [0, N-1] без пропусков и пересечений
2. Top и Bottom никогда не получают остаток (UNBALANCED)
3. Верхняя граница Bottom всегда N-1 (кроме пустых популяций)
4. N = 0 → только Median = [0, 0] (сентинел, а не ошибка)
"""

from typing import Final, Mapping

from src.core.domain.quintile import (
    EMPTY_RANGE,
    GROUP_COUNT,
    PartitionStrategy,
    Range,
)

# Пять диапазонов в порядке Top, High, Median, Low, Bottom
Breakdown = tuple[Range, Range, Range, Range, Range]


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Максимальный размер популяции (беззнаковое 16-битное значение)
POPULATION_COUNT_MAX: Final[int] = 65535

# Таблица для малых популяций (N = 0..4); не выводится из формул
SMALL_POPULATION_TABLE: Final[Mapping[int, Breakdown]] = {
    0: (EMPTY_RANGE, EMPTY_RANGE, Range.of(0, 0), EMPTY_RANGE, EMPTY_RANGE),
    1: (EMPTY_RANGE, EMPTY_RANGE, Range.of(0, 0), EMPTY_RANGE, EMPTY_RANGE),
    2: (EMPTY_RANGE, Range.of(0, 0), EMPTY_RANGE, Range.of(1, 1), EMPTY_RANGE),
    3: (EMPTY_RANGE, Range.of(0, 0), Range.of(1, 1), Range.of(2, 2), EMPTY_RANGE),
    4: (Range.of(0, 0), Range.of(1, 1), EMPTY_RANGE, Range.of(2, 2), Range.of(3, 3)),
}

# Прирост групп (Top, High, Median, Low, Bottom) по остатку N % 5
UNBALANCED_GROWTH: Final[Mapping[int, tuple[int, int, int, int, int]]] = {
    1: (0, 0, 1, 0, 0),  # M+1
    2: (0, 1, 0, 1, 0),  # H+1, L+1
    3: (0, 1, 1, 1, 0),  # H+1, M+1, L+1
    4: (0, 2, 0, 2, 0),  # H+2, L+2
}


# =============================================================================
# VALIDATION
# =============================================================================


def validate_population_count(population_count: int) -> None:
    """
    Валидация размера популяции.

    Args:
        population_count: Количество членов популяции

    Raises:
        ValueError: Если значение не целое или вне [0, POPULATION_COUNT_MAX]
    """
    if isinstance(population_count, bool) or not isinstance(population_count, int):
        raise ValueError(
            f"population_count must be an integer, got {type(population_count).__name__}"
        )

    if population_count < 0:
        raise ValueError(f"population_count must be >= 0, got {population_count}")

    if population_count > POPULATION_COUNT_MAX:
        raise ValueError(
            f"population_count must be <= {POPULATION_COUNT_MAX}, got {population_count}"
        )


# =============================================================================
# STRATEGY DISPATCH
# =============================================================================


def select_strategy(population_count: int) -> PartitionStrategy:
    """
    Выбор стратегии разбиения (first-match-wins).

    N = 0 кратно 5 и попадает в IDEAL, а не в SMALL.
    """
    if population_count % GROUP_COUNT == 0:
        return PartitionStrategy.IDEAL
    if population_count < GROUP_COUNT:
        return PartitionStrategy.SMALL
    return PartitionStrategy.UNBALANCED


def partition(population_count: int) -> tuple[PartitionStrategy, Breakdown]:
    """
    Разбиение популяции на пять квинтильных диапазонов.

    Args:
        population_count: Размер популяции (отсортированной от высшего ранга)

    Returns:
        (выбранная стратегия, диапазоны Top..Bottom)

    Raises:
        ValueError: Если population_count вне допустимого домена
    """
    validate_population_count(population_count)

    strategy = select_strategy(population_count)

    if strategy == PartitionStrategy.IDEAL:
        return strategy, partition_ideal(population_count)
    if strategy == PartitionStrategy.SMALL:
        return strategy, partition_small(population_count)
    return strategy, partition_unbalanced(population_count)


# =============================================================================
# STRATEGIES
# =============================================================================


def partition_ideal(population_count: int) -> Breakdown:
    """
    Равное разбиение для N кратного 5.

    ФОРМУЛЫ (size = N/5, index = size-1):
        Top    = [0, index]
        High   = [index+1, index+size]
        Median = [index+size+1, index+2*size]
        Low    = [index+2*size+1, index+3*size]
        Bottom = [index+3*size+1, N-1]

    Examples:
        N=5  → 0~0, 1~1, 2~2, 3~3, 4~4
        N=10 → 0~1, 2~3, 4~5, 6~7, 8~9
        N=15 → 0~2, 3~5, 6~8, 9~11, 12~14

    При N = 0 формулы дают пять пустых диапазонов (Median тоже пуст),
    поэтому возвращается сентинел Median = [0, 0] явно.
    """
    if population_count % GROUP_COUNT != 0:
        raise ValueError(f"Ideal partition requires N % 5 == 0, got N={population_count}")

    if population_count == 0:
        return SMALL_POPULATION_TABLE[0]

    size = population_count // GROUP_COUNT
    index = size - 1

    return (
        Range.of(0, index),
        Range.of(index + 1, index + size),
        Range.of(index + size + 1, index + size * 2),
        Range.of(index + size * 2 + 1, index + size * 3),
        Range.of(index + size * 3 + 1, population_count - 1),
    )


def partition_small(population_count: int) -> Breakdown:
    """
    Табличное разбиение для N < 5.

    Истинное разбиение на квинтили невозможно; таблица задана вручную.
    """
    try:
        return SMALL_POPULATION_TABLE[population_count]
    except KeyError:
        raise ValueError(
            f"Small partition requires 0 <= N < {GROUP_COUNT}, got N={population_count}"
        ) from None


def partition_unbalanced(population_count: int) -> Breakdown:
    """
    Разбиение для N >= 6 с остатком extra = N % 5.

    Базовые блоки ширины size = N // 5 (как в IDEAL), затем внутренние группы
    (High/Median/Low) растут на остаток согласно UNBALANCED_GROWTH. Рост группы
    сдвигает начало всех последующих групп на ту же величину.

    Examples:
        N=6 (extra=1) → 0~0, 1~1, 2~3, 4~4, 5~5
        N=7 (extra=2) → 0~0, 1~2, 3~3, 4~5, 6~6
        N=9 (extra=4) → 0~0, 1~3, 4~4, 5~7, 8~8
    """
    extra = population_count % GROUP_COUNT
    if extra == 0 or population_count < GROUP_COUNT:
        raise ValueError(
            f"Unbalanced partition requires N > 5 and N % 5 != 0, got N={population_count}"
        )

    size = population_count // GROUP_COUNT
    growth = UNBALANCED_GROWTH[extra]

    ranges = []
    head = 0
    for group_growth in growth:
        tail = head + size + group_growth - 1
        ranges.append(Range.of(head, tail))
        head = tail + 1

    return tuple(ranges)
