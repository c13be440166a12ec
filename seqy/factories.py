from __future__ import annotations
from .types import *
from .sequence import Sequence

def over(source: Union[Sequence[T], Iterable[T], SourceFactory[T]]) -> Sequence[T]:
    """create a sequence from a sequence, an iterable or a generator function"""
    return Sequence.over(source)

def from_range(low: int, high: int) -> Sequence[int]:
    """create a sequence of integers from low to high, both inclusive"""
    return Sequence.range(low, high)

def empty() -> Sequence[Any]:
    """create empty sequence"""
    return Sequence.over(())

# --- aliases ---
S = over
