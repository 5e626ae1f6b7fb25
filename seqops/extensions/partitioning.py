from __future__ import annotations
import logging
from operator import index
from ..cursor import Cursor, count_remaining, require_restartable
from ..types import *

logger = logging.getLogger(__name__)


# --- tail operations (two passes, restartable source) ---

def take_last(source: Iterable[T], amount: int) -> Iterator[T]:
    """
    lazily yield the last `amount` elements in source order, or all of them if
    there are fewer. a negative amount is treated as zero.
    the source is counted first and then replayed, so it must be restartable.
    """
    amount = max(0, index(amount))
    require_restartable(source, "take_last")
    return _take_last_data(source, amount)


def _take_last_data(source: Iterable[T], amount: int) -> Iterator[T]:
    if amount == 0:
        return
    with Cursor(source) as cursor:
        count = count_remaining(cursor)
        logger.debug(f"take_last: counted {count} elements, keeping {min(amount, count)}")
        if count == 0:
            return
        cursor.reset()
        for _ in range(count - min(amount, count)):
            cursor.advance()
        yield from cursor


def skip_last(source: Iterable[T], amount: int) -> Iterator[T]:
    """
    lazily yield everything except the last `amount` elements. a negative amount
    is treated as zero. the source is counted first, so it must be restartable.
    """
    amount = max(0, index(amount))
    require_restartable(source, "skip_last")
    return _skip_last_data(source, amount)


def _skip_last_data(source: Iterable[T], amount: int) -> Iterator[T]:
    with Cursor(source) as cursor:
        if amount == 0:
            yield from cursor
            return
        keep = count_remaining(cursor) - amount
        logger.debug(f"skip_last: keeping {max(keep, 0)} elements")
        if keep <= 0:
            return
        cursor.reset()
        for item in cursor:
            yield item
            if cursor.position >= keep - 1:
                return


# --- predicate bounded operations (single pass) ---

def take_until(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """yield elements until the first one the predicate accepts. that element is not yielded"""
    with Cursor(source) as cursor:
        for item in cursor:
            if predicate(item):
                return
            yield item


def take_until_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> Iterator[T]:
    """take_until() with the element's position passed to the predicate"""
    with Cursor(source) as cursor:
        for item in cursor:
            if predicate(item, cursor.position):
                return
            yield item


def skip_until(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """
    discard elements until the predicate accepts one, then yield that element and
    everything after it. the predicate is not called again after the first match.
    """
    with Cursor(source) as cursor:
        for item in cursor:
            if predicate(item):
                yield item
                break
        yield from cursor


def skip_until_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> Iterator[T]:
    """skip_until() with the element's position passed to the predicate"""
    with Cursor(source) as cursor:
        for item in cursor:
            if predicate(item, cursor.position):
                yield item
                break
        yield from cursor
