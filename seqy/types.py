from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
SourceFactory = Callable[[], Iterable[T]]


class Group(Generic[K, T]):
    """one group produced by group_by: the key and its members in source order"""

    __slots__ = ('key', 'values')

    def __init__(self, key: K, values: List[T]):
        self.key = key
        self.values = values

    def __iter__(self) -> Iterator[Any]:
        # allows `key, values = group`
        yield self.key
        yield self.values

    def __len__(self) -> int: return len(self.values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Group):
            return NotImplemented
        return self.key == other.key and self.values == other.values

    def __hash__(self) -> int:
        return hash(self.key)

    def __repr__(self) -> str:
        return f"Group(key={self.key!r}, values={len(self.values)})"
