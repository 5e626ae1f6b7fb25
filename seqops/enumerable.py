from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from .errors import SourceNotRestartableError
from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.actions import UtilityAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IEnumerable(ABC, Generic[T]):
    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """start a traversal of the sequence"""
        pass

    @property
    @abstractmethod
    def restartable(self) -> bool:
        """whether the sequence can be traversed more than once"""
        pass

# --- base enumerable implementation ---

class _BaseEnumerable(IEnumerable[T]):
    def __init__(self, data_func: Callable[[], Iterable[T]], restartable: bool = True,
                 borrowed: bool = False):
        """init with a function that returns a fresh iterable each time it is called"""
        self._data_func = data_func
        self._restartable = restartable
        # data_func hands back the caller's own iterator, which cursors must not close
        self._borrowed = borrowed
        self._consumed = False

    @property
    def restartable(self) -> bool:
        return self._restartable

    @property
    def borrowed(self) -> bool:
        """whether iterating yields an iterator owned by the caller rather than by the chain"""
        return self._borrowed

    def _derive(self, data_func: Callable[[], Iterable[U]]) -> 'Enumerable[U]':
        """wrap a new stage of the chain. it is only as restartable as this one"""
        return Enumerable(data_func, restartable=self._restartable)

    def __iter__(self) -> Iterator[T]:
        # nothing is cached, every traversal re-runs the chain from its root
        if not self._restartable:
            if self._consumed:
                logger.debug("refusing second traversal of a single-pass enumerable")
                raise SourceNotRestartableError("second traversal")
            self._consumed = True
        return iter(self._data_func())

    def __repr__(self) -> str:
        kind = "restartable" if self._restartable else "single-pass"
        return f"{type(self).__name__}({kind})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """a lazy, chainable wrapper around any python iterable."""
    def __init__(self, data_func: Callable[[], Iterable[T]], restartable: bool = True,
                 borrowed: bool = False):
        super().__init__(data_func, restartable, borrowed)
        # --- initialize accessors ---
        self.util = UtilityAccessor(self)
        self.to = TerminalAccessor(self)
