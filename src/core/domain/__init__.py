"""
Domain models and value objects.

Contains quintile value types: Group, PartitionStrategy, Range.
"""

from src.core.domain.quintile import (
    EMPTY_RANGE,
    GROUP_COUNT,
    Group,
    PartitionStrategy,
    Range,
)

__all__ = [
    # Constants
    "EMPTY_RANGE",
    "GROUP_COUNT",
    # Enums
    "Group",
    "PartitionStrategy",
    # Models
    "Range",
]
