from __future__ import annotations
import logging
from collections.abc import Iterator as IteratorABC
from .errors import CursorStateError, SequenceError, SourceNotRestartableError
from .types import *

logger = logging.getLogger(__name__)

# marks a cursor that is not positioned on an element
_UNSET = object()


def is_restartable(source: Iterable[Any]) -> bool:
    """true when calling iter() on the source again starts a fresh traversal"""
    # enumerables know whether their root source can be replayed
    restartable = getattr(source, 'restartable', None)
    if isinstance(restartable, bool):
        return restartable
    return not isinstance(source, IteratorABC)


def require_restartable(source: Iterable[Any], operation: str) -> None:
    """fail fast, before anything is consumed, if the source is single-pass"""
    if not is_restartable(source):
        logger.debug(f"{operation}: rejecting single-pass source of type {type(source).__name__}")
        raise SourceNotRestartableError(operation)


class Cursor(Generic[T]):
    """
    forward cursor over a source sequence.

    advance() moves to the next element and reports whether there was one,
    current is the element it landed on. reset() rewinds to the start and
    only works for restartable sources. the cursor is a context manager and
    closes the iterator it acquired on exit. iterators handed in by the
    caller are borrowed and never closed.
    """

    def __init__(self, source: Iterable[T]):
        self._source = source
        self._iterator: Optional[Iterator[T]] = None
        self._owned = False
        self._current: Any = _UNSET
        self._position = -1
        self._acquire()

    def _acquire(self) -> None:
        iterator = iter(self._source)
        # a root enumerable over a caller's iterator hands that iterator back as-is
        self._owned = iterator is not self._source and getattr(self._source, 'borrowed', None) is not True
        self._iterator = iterator
        self._current = _UNSET
        self._position = -1

    def _release(self) -> None:
        iterator, self._iterator = self._iterator, None
        self._current = _UNSET
        if self._owned and hasattr(iterator, 'close'):
            iterator.close()

    @property
    def current(self) -> T:
        if self._current is _UNSET:
            raise CursorStateError("cursor is not positioned on an element, call advance() first")
        return self._current

    @property
    def position(self) -> int:
        """zero-based index of the current element, -1 before the first advance"""
        return self._position

    @property
    def closed(self) -> bool:
        return self._iterator is None

    def advance(self) -> bool:
        if self._iterator is None:
            raise CursorStateError("cursor is closed")
        try:
            self._current = next(self._iterator)
        except StopIteration:
            self._current = _UNSET
            return False
        self._position += 1
        return True

    def reset(self) -> None:
        require_restartable(self._source, "reset")
        logger.debug(f"resetting cursor over {type(self._source).__name__}")
        self._release()
        self._acquire()

    def close(self) -> None:
        if self._iterator is not None:
            self._release()

    def __iter__(self) -> 'Cursor[T]':
        return self

    def __next__(self) -> T:
        if self.advance():
            return self._current
        raise StopIteration

    def __enter__(self) -> 'Cursor[T]':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self.closed else f"position={self._position}"
        return f"Cursor({type(self._source).__name__}, {state})"


def count_remaining(cursor: Cursor[Any]) -> int:
    """advance the cursor to the end, returning how many elements it passed"""
    count = 0
    while cursor.advance():
        count += 1
    return count


def materialize(source: Iterable[T], operation: str) -> List[T]:
    """
    copy a finite, restartable source into a pre-sized list.
    one pass counts, a second pass after reset copies.
    """
    require_restartable(source, operation)
    with Cursor(source) as cursor:
        count = count_remaining(cursor)
        logger.debug(f"{operation}: counted {count} elements, replaying source")
        buffer: List[Any] = [None] * count
        cursor.reset()
        for i in range(count):
            if not cursor.advance():
                raise SequenceError(f"{operation}: source yielded fewer elements on replay than on the counting pass")
            buffer[i] = cursor.current
    return buffer
