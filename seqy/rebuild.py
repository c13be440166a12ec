from __future__ import annotations

import inspect
import logging
import typing
from collections.abc import Iterable as IterableABC

from .sources import normalize_source
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

logger = logging.getLogger(__name__)

# concrete class -> whether it can be built from a single source argument
_simple_constructors: Dict[type, bool] = {}

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _accepts_source(function: Any, parameter: inspect.Parameter) -> bool:
    """true when the parameter is unannotated, Any, or annotated as a non-text iterable type"""
    annotation = parameter.annotation
    if annotation is inspect.Parameter.empty:
        return True
    if isinstance(annotation, str):
        # annotations may be strings under `from __future__ import annotations`
        try:
            annotation = typing.get_type_hints(function)[parameter.name]
        except (NameError, TypeError, AttributeError, SyntaxError, KeyError):
            return False
    if annotation is Any:
        return True
    origin = typing.get_origin(annotation) or annotation
    return (isinstance(origin, type)
            and issubclass(origin, IterableABC)
            and not issubclass(origin, (str, bytes)))


def has_simple_constructor(cls: type) -> bool:
    """
    true when `cls(source)` is a valid call: the constructor takes exactly one
    positional parameter besides self, unannotated or annotated as an iterable.
    computed once per class.
    """
    cached = _simple_constructors.get(cls)
    if cached is not None:
        return cached

    try:
        params = list(inspect.signature(cls.__init__).parameters.values())[1:]
    except (TypeError, ValueError):
        params = None

    simple = (params is not None
              and len(params) == 1
              and params[0].kind in _POSITIONAL
              and _accepts_source(cls.__init__, params[0]))
    logger.debug(f"constructor of {cls.__qualname__} is {'simple' if simple else 'not simple'}")
    if not simple:
        logger.info(f"{cls.__qualname__} cannot be rebuilt from a single source, operators will return Sequence")

    _simple_constructors[cls] = simple
    return simple


def rebuild(sequence: 'Sequence[Any]', source: Any) -> 'Sequence[Any]':
    """
    build the next sequence in a chain. keeps the concrete type of `sequence`
    when that type has a simple constructor, otherwise falls back to Sequence.
    """
    from .sequence import Sequence

    if isinstance(source, Sequence):
        return source
    cls = type(sequence)
    if has_simple_constructor(cls):
        return cls(normalize_source(source))
    return Sequence.over(source)
