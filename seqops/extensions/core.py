from __future__ import annotations
import typing
from ..cursor import require_restartable
from ..types import *
from .filtering import without, without_with_index
from .ordering import sort, sort_with
from .partitioning import (
    take_last, skip_last, take_until, take_until_with_index, skip_until, skip_until_with_index
)
from .windowing import normalize_window, subset, remove_subset

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class _CoreOperations(Generic[T]):
    """
    fluent versions of the free operators. lazy methods return a new enumerable
    that re-runs the operator each time it is iterated; sorts run immediately.
    """

    # --- filtering ---

    def without(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """drop elements matching the predicate"""
        return self._derive(lambda: without(self, predicate))

    def without_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        """drop elements matching the predicate, which also receives the element's index"""
        return self._derive(lambda: without_with_index(self, predicate))

    # --- ordering (eager) ---

    def sort(self: 'Enumerable[T]', option: SortOption = SortOption.DEFAULT) -> 'Enumerable[T]':
        """sort by natural ordering, right now. the result no longer depends on this enumerable"""
        from ..factories import from_iterable
        return from_iterable(sort(self, option))

    def sort_with(self: 'Enumerable[T]', comparer: Comparer[T]) -> 'Enumerable[T]':
        """sort with a three-way comparer, right now"""
        from ..factories import from_iterable
        return from_iterable(sort_with(self, comparer))

    # --- tails ---

    def take_last(self: 'Enumerable[T]', amount: int) -> 'Enumerable[T]':
        """take the last 'amount' elements"""
        require_restartable(self, "take_last")
        return self._derive(lambda: take_last(self, amount))

    def skip_last(self: 'Enumerable[T]', amount: int) -> 'Enumerable[T]':
        """skip the last 'amount' elements"""
        require_restartable(self, "skip_last")
        return self._derive(lambda: skip_last(self, amount))

    # --- predicate bounded ---

    def take_until(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """take elements until the predicate is true"""
        return self._derive(lambda: take_until(self, predicate))

    def take_until_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return self._derive(lambda: take_until_with_index(self, predicate))

    def skip_until(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements until the predicate is true, then take the rest"""
        return self._derive(lambda: skip_until(self, predicate))

    def skip_until_with_index(self: 'Enumerable[T]', predicate: IndexedPredicate[T]) -> 'Enumerable[T]':
        return self._derive(lambda: skip_until_with_index(self, predicate))

    # --- windows ---

    def subset(self: 'Enumerable[T]', start_index: int, length: int) -> 'Enumerable[T]':
        """elements in the window [start_index, start_index + length)"""
        normalize_window(start_index, length)  # reject bad arguments now rather than on iteration
        return self._derive(lambda: subset(self, start_index, length))

    def remove_subset(self: 'Enumerable[T]', start_index: int, length: int) -> 'Enumerable[T]':
        """elements outside the window [start_index, start_index + length)"""
        normalize_window(start_index, length)
        return self._derive(lambda: remove_subset(self, start_index, length))
