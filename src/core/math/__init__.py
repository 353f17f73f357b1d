"""
Core math modules

Алгоритмы разбиения ранжированной популяции на квинтили.
"""

# Partition
from src.core.math.partition import (
    POPULATION_COUNT_MAX,
    SMALL_POPULATION_TABLE,
    UNBALANCED_GROWTH,
    Breakdown,
    partition,
    partition_ideal,
    partition_small,
    partition_unbalanced,
    select_strategy,
    validate_population_count,
)

__all__ = [
    # Partition — Constants
    "POPULATION_COUNT_MAX",
    "SMALL_POPULATION_TABLE",
    "UNBALANCED_GROWTH",
    # Partition — Types
    "Breakdown",
    # Partition — Functions
    "partition",
    "partition_ideal",
    "partition_small",
    "partition_unbalanced",
    "select_strategy",
    "validate_population_count",
]
