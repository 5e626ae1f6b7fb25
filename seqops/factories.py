import typing
from collections.abc import Iterator as IteratorABC
from itertools import repeat as itertools_repeat
from .cursor import is_restartable
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def _is_borrowed(data: Iterable[Any]) -> bool:
    """the caller keeps ownership of iterators it hands in, cursors must leave them open"""
    return isinstance(data, IteratorABC) or getattr(data, 'borrowed', None) is True

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """
    create enumerable from iterable. iterators (generators, map objects, files)
    and single-pass enumerables give a single-pass enumerable.
    """
    from .enumerable import Enumerable
    return Enumerable(lambda: data, restartable=is_restartable(data), borrowed=_is_borrowed(data))

def once(data: Iterable[T]) -> 'Enumerable[T]':
    """create a single-pass enumerable, even over a restartable iterable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: data, restartable=False, borrowed=_is_borrowed(data))

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(lambda: range(start, start + count))

def repeat(item: T, count: int) -> 'Enumerable[T]':
    """create enumerable with repeated item"""
    from .enumerable import Enumerable
    return Enumerable(lambda: itertools_repeat(item, count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable(lambda: ())

def generate(generator_func: Callable[[], Iterable[T]]) -> 'Enumerable[T]':
    """create a restartable enumerable from a generator function, called again for every traversal"""
    from .enumerable import Enumerable
    return Enumerable(generator_func)

# --- aliases ---
seq = from_iterable
S = from_iterable
