from __future__ import annotations
import typing
from itertools import chain, islice, takewhile, dropwhile
from ..sources import normalize_source
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

class _CoreOperations(Generic[T]):
    def map(self: 'Sequence[T]', selector: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        def map_data():
            for item in self:
                yield selector(item)
        return self._build(map_data)

    def map_flat(self: 'Sequence[T]', selector: Selector[T, Iterable[U]]) -> 'Sequence[U]':
        """project each element to an iterable and flatten the results one level"""
        def flat_map_data():
            for item in self:
                yield from selector(item)
        return self._build(flat_map_data)

    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """filter elements based on a predicate"""
        def filter_data():
            for item in self:
                if predicate(item):
                    yield item
        return self._build(filter_data)

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """take the first 'count' elements"""
        # islice stops pulling from upstream once it has enough
        return self._build(lambda: islice(self, max(count, 0)))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """skip the first 'count' elements"""
        return self._build(lambda: islice(self, max(count, 0), None))

    def take_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """take elements while predicate is true"""
        return self._build(lambda: takewhile(predicate, self))

    def skip_while(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """skip elements while predicate is true, then keep everything from the first failure on"""
        return self._build(lambda: dropwhile(predicate, self))

    def concat(self: 'Sequence[T]', *sources: Union[Iterable[T], SourceFactory[T]]) -> 'Sequence[T]':
        """
        appends the elements of each source, in argument order.
        sources are checked now, but only iterated when the result is.
        """
        if not sources:
            return self
        normalized = [normalize_source(source) for source in sources]
        return self._build(lambda: chain(self, *normalized))

    def each(self: 'Sequence[T]', callback: Callable[[T], Any]) -> 'Sequence[T]':
        """
        calls callback on every element for its side-effects.
        this is an EAGER operation and returns the same sequence.
        """
        for item in self:
            callback(item)
        return self
