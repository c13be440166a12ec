from __future__ import annotations
import typing
import operator
from functools import reduce
from ..option import Option
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class _StatsOperations(Generic[T]):
    def _selected(self: 'Sequence[T]', selector: Optional[Selector[T, Any]]) -> List[Any]:
        """values to aggregate: selector results (or the elements), None values dropped"""
        values = (selector(item) for item in self) if selector else iter(self)
        return [value for value in values if value is not None]

    def sum(self: 'Sequence[T]', selector: Optional[Selector[T, Any]] = None) -> Option[Any]:
        """sum of the elements, or of selector(element). empty for an empty sequence."""
        values = self._selected(selector)
        if not values: return Option.empty()
        # fold with + rather than builtin sum(), which rejects str and needs a zero
        return Option.of_nullable(reduce(operator.add, values))

    def min(self: 'Sequence[T]', selector: Optional[Selector[T, Any]] = None) -> Option[Any]:
        """smallest element, or smallest selector(element)"""
        values = self._selected(selector)
        return Option.of_nullable(min(values)) if values else Option.empty()

    def max(self: 'Sequence[T]', selector: Optional[Selector[T, Any]] = None) -> Option[Any]:
        """largest element, or largest selector(element)"""
        values = self._selected(selector)
        return Option.of_nullable(max(values)) if values else Option.empty()

    def average(self: 'Sequence[T]', selector: Optional[Selector[T, Any]] = None) -> Option[float]:
        """sum divided by the number of elements"""
        # single read of the source
        data = self.to_list()
        return self._build(data).sum(selector).map(lambda total: total / len(data))

    def median(self: 'Sequence[T]', selector: Optional[Selector[T, Any]] = None) -> Option[Any]:
        """
        median of the elements, ordered by selector when one is given.
        odd count: the middle element, with selector applied to it once more.
        even count: the average (through selector) of the two middle elements.
        """
        data = self.to_list()
        count = len(data)
        if count == 0:
            return Option.empty()

        materialized = self._build(data)
        ordered = materialized.sort_by(selector) if selector else materialized.sort()
        if count % 2 == 0:
            return ordered.skip(count // 2 - 1).take(2).average(selector)

        middle = ordered.skip(count // 2).first()
        if selector is not None and middle.is_present():
            return middle.map(selector)
        return middle
