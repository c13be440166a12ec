from __future__ import annotations
import typing
import logging
from collections import defaultdict
from ..types import *

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)

class _GroupingOperations(Generic[T]):
    def group_by(self: 'Sequence[T]', selector: KeySelector[T, K]) -> 'Sequence[Group[K, T]]':
        """
        group elements by a key. groups are collected now, in first-seen key order,
        and handed out lazily as Group records; members keep their source order.
        """
        groups: Dict[K, List[T]] = defaultdict(list)
        for item in self:
            groups[selector(item)].append(item)
        logger.debug(f"grouped elements into {len(groups)} groups")

        def group_data():
            for key, values in groups.items():
                # fresh member list per pass
                yield Group(key, list(values))
        return self._build(group_data)

    def distinct(self: 'Sequence[T]') -> 'Sequence[T]':
        """return distinct elements. preserves order of first appearance."""
        # dicts keep insertion order, so fromkeys is an order-preserving unique filter
        return self._build(list(dict.fromkeys(self)))
