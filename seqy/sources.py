from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable as IterableABC

from .errors import InvalidArgumentError, IllegalStateError
from .types import *

logger = logging.getLogger(__name__)

_EXHAUSTED = object()
_REQUIRED_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.KEYWORD_ONLY,
)


def _required_parameters(factory: Any) -> List[str]:
    """names of the parameters a call with no arguments would leave unfilled"""
    try:
        parameters = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):
        # no introspectable signature; a bad factory fails on the first pass instead
        return []
    return [p.name for p in parameters if p.kind in _REQUIRED_KINDS and p.default is p.empty]


class RewindableSource(Generic[T]):
    """
    makes a one-shot generator replayable.

    stores the function that produces the generator rather than a generator,
    and calls it again for every new pass. each `iter()` gets its own fresh
    iterator, so nested or repeated loops over the same source are independent.

    the explicit cursor api (`restart`, `current`, `advance`, `has_more`) keeps a
    single iterator on the instance. it belongs to one consumer at a time; it is
    not locked, and driving it from two consumers at once is a caller error.
    """

    def __init__(self, factory: SourceFactory[T]):
        if not callable(factory):
            raise InvalidArgumentError("the source factory must be callable.")
        if _required_parameters(factory):
            raise InvalidArgumentError("the source factory must take no arguments.")
        self._factory = factory
        self._iterator: Optional[Iterator[T]] = None
        self._current: Any = _EXHAUSTED

    def _produce(self) -> Iterator[T]:
        produced = self._factory()
        if not isinstance(produced, IterableABC) or isinstance(produced, (str, bytes)):
            raise InvalidArgumentError("the source factory must return an iterable.")
        return iter(produced)

    def __iter__(self) -> Iterator[T]:
        return self._produce()

    # --- cursor protocol ---

    def restart(self) -> None:
        """drop the current pass and start a new one from the beginning"""
        logger.debug(f"restarting source {self._factory!r}")
        self._iterator = self._produce()
        self.advance()

    def advance(self) -> None:
        if self._iterator is None:
            raise IllegalStateError("restart() must be called before advancing.")
        self._current = next(self._iterator, _EXHAUSTED)

    def has_more(self) -> bool:
        return self._iterator is not None and self._current is not _EXHAUSTED

    @property
    def current(self) -> T:
        if not self.has_more():
            raise IllegalStateError("the source has no current element.")
        return self._current

    def __repr__(self) -> str:
        return f"RewindableSource({self._factory!r})"


def normalize_source(source: Any) -> Iterable[Any]:
    """
    turn any accepted source into something that can be iterated from the start.
    sequences and other iterables pass through; zero-argument callables are
    wrapped in a RewindableSource. strings and bytes are rejected.
    """
    if isinstance(source, (str, bytes)):
        raise InvalidArgumentError("source must be iterable")
    if isinstance(source, IterableABC):
        return source
    if callable(source):
        return RewindableSource(source)
    raise InvalidArgumentError("source must be iterable")
