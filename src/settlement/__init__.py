"""Settlement — квинтильное распределение ранжированной популяции поселения.

- Distribution: пять диапазонов Top/High/Median/Low/Bottom
- find_quintile: группа члена по индексу в отсортированной популяции
"""

from .distribution import Distribution, build_distribution

__all__ = [
    "Distribution",
    "build_distribution",
]
