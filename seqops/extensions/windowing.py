from __future__ import annotations
from operator import index
from ..cursor import Cursor
from ..types import *


def normalize_window(start_index: int, length: int) -> Tuple[int, int]:
    """
    turn a (start_index, length) pair into a non-negative (start, length) window.

    the window end is start_index + length. an end at or before zero is an empty
    window; a negative start is clamped to zero and the length shrunk to reach the
    same end. a negative length is an empty window.
    """
    start, length = index(start_index), index(length)
    if start + length <= 0:
        return 0, 0
    if start < 0:
        return 0, start + length
    if length < 0:
        return start, 0
    return start, length


def subset(source: Iterable[T], start_index: int, length: int) -> Iterator[T]:
    """lazily yield the elements whose positions fall in [start, start + length)"""
    start, length = normalize_window(start_index, length)
    return _subset_data(source, start, start + length)


def _subset_data(source: Iterable[T], start: int, end: int) -> Iterator[T]:
    if start >= end:
        return
    with Cursor(source) as cursor:
        for item in cursor:
            if cursor.position >= start:
                yield item
                # window is full, stop without pulling another element
                if cursor.position >= end - 1:
                    return


def remove_subset(source: Iterable[T], start_index: int, length: int) -> Iterator[T]:
    """
    lazily yield every element outside the window [start, start + length).
    uses the same window normalization as subset(), so the two always partition the source.
    """
    start, length = normalize_window(start_index, length)
    return _remove_subset_data(source, start, start + length)


def _remove_subset_data(source: Iterable[T], start: int, end: int) -> Iterator[T]:
    with Cursor(source) as cursor:
        for item in cursor:
            if not start <= cursor.position < end:
                yield item
