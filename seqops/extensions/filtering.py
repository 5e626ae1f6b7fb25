from __future__ import annotations
from ..cursor import Cursor
from ..types import *


def without(source: Iterable[T], predicate: Predicate[T]) -> Iterator[T]:
    """lazily yield every element the predicate rejects, in source order"""
    with Cursor(source) as cursor:
        for item in cursor:
            if not predicate(item):
                yield item


def without_with_index(source: Iterable[T], predicate: IndexedPredicate[T]) -> Iterator[T]:
    """
    like without(), but the predicate also receives the element's position.
    positions count every element of the source, excluded ones included.
    """
    with Cursor(source) as cursor:
        for item in cursor:
            if not predicate(item, cursor.position):
                yield item
