from __future__ import annotations

from .types import *
from .sources import normalize_source
from .rebuild import rebuild

# --- operator groups ---
from .extensions.core import _CoreOperations
from .extensions.ordering import _OrderingOperations
from .extensions.grouping import _GroupingOperations
from .extensions.stats import _StatsOperations
from .extensions.terminal import _TerminalOperations

# --- base sequence implementation ---

class _BaseSequence(Generic[T]):
    def __init__(self, source: Iterable[T]):
        """init with an already normalized source"""
        self._source = source
        self._count: Optional[int] = None

    def _build(self, source: Any) -> 'Sequence[Any]':
        """wrap a new deferred computation, keeping this sequence's type when possible"""
        return rebuild(self, source)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def __repr__(self) -> str:
        # must not iterate the source
        return f"{type(self).__name__}(source={type(self._source).__name__})"

# --- main sequence class ---

class Sequence(
    _BaseSequence[T],
    _CoreOperations[T],
    _OrderingOperations[T],
    _GroupingOperations[T],
    _StatsOperations[T],
    _TerminalOperations[T]
):
    """a lazy, replayable, chainable sequence over any iterable source."""

    @classmethod
    def over(cls, source: Union['Sequence[T]', Iterable[T], SourceFactory[T]]) -> 'Sequence[T]':
        """
        create a sequence from a sequence (returned as is), any iterable, or a
        zero-argument function returning an iterable. the function form is
        replayable: it is called again for every pass over the sequence.
        """
        if isinstance(source, Sequence):
            return source
        return cls(normalize_source(source))

    @classmethod
    def range(cls, low: int, high: int) -> 'Sequence[int]':
        """integers from low to high, both inclusive. counts down when low > high."""
        def range_data():
            step = 1 if low <= high else -1
            yield from range(low, high + step, step)
        return cls.over(range_data)
