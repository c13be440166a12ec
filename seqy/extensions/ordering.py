from __future__ import annotations
import typing
import logging
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)

# python's sort is stable, including with reverse=True, so ties always keep
# their upstream order in every method below.

class _OrderingOperations(Generic[T]):
    def _sorted(self: 'Sequence[T]', key: Optional[KeySelector[T, Any]], descending: bool) -> 'Sequence[T]':
        data = sorted(self, key=key, reverse=descending)
        logger.debug(f"sorted {len(data)} elements (descending={descending})")
        return self._build(data)

    def sort(self: 'Sequence[T]') -> 'Sequence[T]':
        """sort elements in natural ascending order"""
        return self._sorted(None, False)

    def sort_descending(self: 'Sequence[T]') -> 'Sequence[T]':
        """sort elements in natural descending order"""
        return self._sorted(None, True)

    def sort_by(self: 'Sequence[T]', selector: KeySelector[T, K]) -> 'Sequence[T]':
        """sort elements by a key"""
        return self._sorted(selector, False)

    def sort_by_descending(self: 'Sequence[T]', selector: KeySelector[T, K]) -> 'Sequence[T]':
        """sort elements by a key in descending order"""
        return self._sorted(selector, True)

    def reverse(self: 'Sequence[T]') -> 'Sequence[T]':
        """inverts the order of the elements in a sequence"""
        data = list(self)
        data.reverse()
        return self._build(data)
