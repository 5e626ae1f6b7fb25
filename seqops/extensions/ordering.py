from __future__ import annotations
from ..cursor import materialize
from ..types import *


def natural_compare(a: Any, b: Any) -> int:
    """
    three-way comparison using the elements' own ordering.
    a None first operand always compares as less, a None second operand as greater.
    """
    if a is None:
        return -1
    if b is None:
        return 1
    return (a > b) - (a < b)


def _bubble_sort(buffer: List[T], comparer: Comparer[T]) -> List[T]:
    """in-place adjacent-swap sort. swaps only on a strictly positive comparison, so equal items keep their order"""
    count = len(buffer)
    for _ in range(count - 1):
        for j in range(count - 1):
            if comparer(buffer[j], buffer[j + 1]) > 0:
                buffer[j], buffer[j + 1] = buffer[j + 1], buffer[j]
    return buffer


def sort(source: Iterable[T], option: SortOption = SortOption.DEFAULT) -> List[T]:
    """
    eagerly sort a finite, restartable source by the elements' natural ordering.
    returns a new list; the source is read twice (count, then copy) and never modified.
    """
    direction = SortOption(option).multiplier
    data = materialize(source, "sort")
    if len(data) < 2:
        return data
    return _bubble_sort(data, lambda a, b: direction * natural_compare(a, b))


def sort_with(source: Iterable[T], comparer: Comparer[T]) -> List[T]:
    """eagerly sort a finite, restartable source with a three-way comparer (negative, zero, positive)"""
    data = materialize(source, "sort_with")
    if len(data) < 2:
        return data
    return _bubble_sort(data, comparer)
