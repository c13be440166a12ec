from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..option import Option
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

# distinguishes "no element seen" from a None element
_NOTHING = object()

class _TerminalOperations(Generic[T]):
    def count(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, or the elements matching predicate"""
        if predicate is not None:
            return sum(1 for item in self if predicate(item))
        # only the total is cached, and only on this instance
        if self._count is None:
            self._count = sum(1 for _ in self)
        return self._count

    def reduce(self: 'Sequence[T]', accumulator: Accumulator[T, T]) -> Option[T]:
        """fold left, seeded with the first element. empty for an empty sequence."""
        aggregate = _NOTHING
        for item in self:
            aggregate = item if aggregate is _NOTHING else accumulator(aggregate, item)
        return Option.empty() if aggregate is _NOTHING else Option.of_nullable(aggregate)

    def reduce_with(self: 'Sequence[T]', seed: U, accumulator: Accumulator[U, T]) -> Option[U]:
        """fold left starting from seed"""
        aggregate = seed
        for item in self:
            aggregate = accumulator(aggregate, item)
        return Option.of_nullable(aggregate)

    def first(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> Option[T]:
        """get first element, or the first one matching predicate"""
        for item in self:
            if predicate is None or predicate(item):
                return Option.of_nullable(item)
        return Option.empty()

    def last(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> Option[T]:
        """get last element, or the last one matching predicate. always scans everything."""
        found = _NOTHING
        for item in self:
            if predicate is None or predicate(item):
                found = item
        return Option.empty() if found is _NOTHING else Option.of_nullable(found)

    def any(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, or if there is any element at all"""
        if predicate is None:
            return any(True for _ in self)
        return any(predicate(item) for item in self)

    def all(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all(predicate(item) for item in self)

    def contains(self: 'Sequence[T]', element: Any, strict: bool = False) -> bool:
        """
        check membership. strict compares identity (`is`), otherwise python
        equality (`==`), which treats 1, 1.0 and True as equal but not "1".
        """
        if strict:
            return any(item is element for item in self)
        return any(item == element for item in self)

    def join(self: 'Sequence[T]', separator: str = '') -> str:
        """join the string form of every element"""
        return separator.join(str(item) for item in self)

    def to_list(self: 'Sequence[T]') -> List[T]:
        """materialize into a list, in iteration order"""
        return list(self)

    def to_numpy(self: 'Sequence[T]') -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.to_list())

    def to_series(self: 'Sequence[T]') -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.to_list())

    def to_frame(self: 'Sequence[T]') -> pd.DataFrame:
        """convert to pandas dataframe, one row per element"""
        return pd.DataFrame(self.to_list())
