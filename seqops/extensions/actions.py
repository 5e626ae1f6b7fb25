from __future__ import annotations
import typing
from ..cursor import Cursor
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def for_each(source: Iterable[T], action: Action[T]) -> None:
    """call the action on each element, in order, for its side effect. eager"""
    with Cursor(source) as cursor:
        for item in cursor:
            action(item)


def for_each_with_index(source: Iterable[T], action: IndexedAction[T]) -> None:
    """for_each() with the element's zero-based position passed to the action"""
    with Cursor(source) as cursor:
        for item in cursor:
            action(item, cursor.position)


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def for_each(self, action: Action[T]) -> None:
        """
        performs the action on each element of the sequence for side-effects.
        this is an EAGER operation that runs the whole chain immediately.
        """
        for_each(self._enumerable, action)

    def for_each_with_index(self, action: IndexedAction[T]) -> None:
        """eager for_each whose action also receives the element's position"""
        for_each_with_index(self._enumerable, action)
