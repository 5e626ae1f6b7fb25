from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class TerminalAccessor(Generic[T]):
    """
    eager conversions that run the enumerable's chain once.
    on a single-pass enumerable only one terminal call can be made.
    """

    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._enumerable)

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._enumerable)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable)

    def array(self, dtype: Optional[Any] = None) -> np.ndarray:
        """convert to numpy array"""
        return np.array(list(self._enumerable), dtype=dtype)

    def pandas(self, name: Optional[str] = None) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._enumerable), name=name)

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe (rows are usually dicts or tuples)"""
        return pd.DataFrame(list(self._enumerable))

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, or the ones matching the predicate"""
        if predicate is None: return sum(1 for _ in self._enumerable)
        return sum(1 for x in self._enumerable if predicate(x))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        for item in self._enumerable:
            if predicate is None or predicate(item):
                return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default
