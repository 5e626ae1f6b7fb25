from enum import IntEnum
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional,
    List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[T, int], bool]
Comparer = Callable[[T, T], int]
Action = Callable[[T], Any]
IndexedAction = Callable[[T, int], Any]


class SortOption(IntEnum):
    """sort direction for natural-ordering sorts"""
    ASCENDING = 0
    DESCENDING = 1
    # the default is ascending
    DEFAULT = 0

    @property
    def multiplier(self) -> int:
        return -1 if self is SortOption.DESCENDING else 1
