from __future__ import annotations

from .errors import InvalidArgumentError, IllegalStateError
from .types import *

# marks the payload slot of the empty option; None is a legal "no value" input, not a payload
_ABSENT = object()


class Option(Generic[T]):
    """
    a container that either holds a value or holds nothing.

    prefer the factories `of`, `of_nullable` and `empty`. the constructor follows
    the same rules: `Option()` is the empty option and an option passed in is
    returned as is. a present option never holds None, and there is exactly one
    empty option, so `opt is Option.empty()` is a valid emptiness check.
    """

    __slots__ = ('_value',)

    _EMPTY: 'Option[Any]'

    def __new__(cls, value: Any = _ABSENT) -> 'Option[Any]':
        if value is None:
            raise InvalidArgumentError("the given element cannot be None.")
        if isinstance(value, Option):
            return value
        if value is _ABSENT and getattr(cls, '_EMPTY', None) is not None:
            return cls._EMPTY
        instance = super().__new__(cls)
        instance._value = value
        return instance

    # --- factories ---

    @classmethod
    def of(cls, value: Union[T, 'Option[T]']) -> 'Option[T]':
        """wrap a value, which must not be None. an option is returned as is."""
        if value is None:
            raise InvalidArgumentError("the given element cannot be None.")
        if isinstance(value, Option):
            return value
        return cls(value)

    @classmethod
    def of_nullable(cls, value: Union[T, 'Option[T]', None]) -> 'Option[T]':
        """wrap a value, mapping None to the empty option"""
        if value is None:
            return cls._EMPTY
        return cls.of(value)

    @classmethod
    def empty(cls) -> 'Option[Any]':
        """the shared empty option"""
        return cls._EMPTY

    # --- inspection ---

    def is_present(self) -> bool:
        return self._value is not _ABSENT

    def if_present(self, consumer: Callable[[T], Any]) -> 'Option[T]':
        """call consumer with the value when there is one. returns self."""
        if self.is_present():
            consumer(self._value)
        return self

    def get(self) -> T:
        if not self.is_present():
            raise IllegalStateError("the optional element does not exist and cannot be retrieved.")
        return self._value

    # --- combinators ---

    def map(self, selector: Selector[T, U]) -> 'Option[U]':
        """
        apply selector to the value. the result goes through of_nullable, so a
        selector returning None yields the empty option and a selector returning
        an option is not wrapped twice.
        """
        if not self.is_present():
            return Option._EMPTY
        return Option.of_nullable(selector(self._value))

    def filter(self, predicate: Predicate[T]) -> 'Option[T]':
        """keep this option when the predicate holds, otherwise return empty"""
        if self.is_present() and predicate(self._value):
            return self
        return Option._EMPTY

    def or_else(self, value: U) -> Union[T, U]:
        return self._value if self.is_present() else value

    def or_else_get(self, supplier: Callable[[], U]) -> Union[T, U]:
        """like or_else, but the fallback is only computed when needed"""
        return self._value if self.is_present() else supplier()

    def or_else_throw(self, supplier: Callable[[], Any]) -> T:
        """
        return the value, or raise the error produced by supplier.
        the supplier may return an exception instance or an exception class;
        anything else raises IllegalStateError instead.
        """
        if self.is_present():
            return self._value
        error = supplier()
        if isinstance(error, BaseException) or (isinstance(error, type) and issubclass(error, BaseException)):
            raise error
        raise IllegalStateError("the supplied error object must be raisable.")

    # --- python protocol ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        if not self.is_present() or not other.is_present():
            return self.is_present() == other.is_present()
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value) if self.is_present() else hash(_ABSENT)

    def __repr__(self) -> str:
        return f"Option({self._value!r})" if self.is_present() else "Option.empty()"


Option._EMPTY = Option()
