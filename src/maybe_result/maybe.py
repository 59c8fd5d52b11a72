"""Maybe type: Value[T] | Nothing for values that may be absent.

A function that may have nothing to return hands back a Maybe and lets the
caller decide what absence means:

    ```python
    from maybe_result import maybe

    def find_widget(widget_id: str) -> maybe.Maybe[Widget]:
        row = table.get(widget_id)
        if row is None:
            return maybe.not_found('widget', widget_id)
        return maybe.with_value(Widget(**row))

    find_widget('42').map(lambda w: w.name).unwrap_or('unknown')
    find_widget('42').unwrap()  # raises NotFoundError (status 404)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from maybe_result.errors import NoneError, NotFoundError

if TYPE_CHECKING:
    from maybe_result.result import Error, Okay

__all__ = [
    'Empty',
    'Maybe',
    'NotFound',
    'Nothing',
    'NothingType',
    'Value',
    'all_or_none',
    'all_values',
    'any',
    'as_none',
    'is_maybe',
    'not_found',
    'with_value',
    'wrap',
]

type Raisable = BaseException | type[BaseException]

_MISSING: Any = object()


class Value[T](msgspec.Struct, frozen=True):
    """Value variant of Maybe holding a present value of type T.

    Falsy payloads (0, '', False, None) are still present values; only the
    Nothing variant means absence.

    Examples:
        >>> Value(42).unwrap()
        42
        >>> Value(21).map(lambda x: x * 2)
        Value(value=42)
        >>> str(Value('a'))
        "Value('a')"
    """

    value: T

    def is_value(self) -> TypeIs[Value[T]]:
        """Return True since this is Value.

        This method provides type narrowing - after checking is_value(),
        the type checker knows the maybe is Value[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Value."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, alt: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the alternative."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def unwrap_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or_throw(self, err: Raisable | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error to raise."""
        return self.value

    def assert_is_value(self, msg: str | None = None) -> T:  # noqa: ARG002
        """Return the contained value."""
        return self.value

    def assert_is_none(self, msg: str | None = None) -> NoReturn:
        """Raise AssertionError since a value is present.

        Args:
            msg: Optional message; the present value is appended to it.

        Raises:
            AssertionError: Always.
        """
        raise AssertionError(f'{msg or "Expected None"}: {self}')

    def or_(self, other: Maybe[T]) -> Value[T]:  # noqa: ARG002
        """Return self since a value is present."""
        return self

    def or_else(self, f: Callable[[], Maybe[T]]) -> Value[T]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def and_[U](self, other: Maybe[U]) -> Maybe[U]:
        """Return other since a value is present."""
        return other

    def and_then[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Apply a function that returns a Maybe to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Value[U]:
        """Apply a function to the contained value and wrap the result in Value."""
        return Value(f(self.value))

    def map_or[U](self, f: Callable[[T], U], alt: U) -> Value[U]:  # noqa: ARG002
        """Return Value(f(value)); the alternative is unused."""
        return Value(f(self.value))

    def map_or_else[U](self, f: Callable[[T], U], alt_f: Callable[[], U]) -> Value[U]:  # noqa: ARG002
        """Return Value(f(value)) without calling alt_f."""
        return Value(f(self.value))

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Return self if the predicate holds for the value, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def to_result(self, error: Any = _MISSING) -> Okay[T]:  # noqa: ARG002
        """Convert to Result, returning Okay(value)."""
        from maybe_result.result import Okay

        return Okay(self.value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the contained value if it is iterable.

        A non-iterable payload yields nothing, which makes it
        indistinguishable from Nothing under iteration.
        """
        if isinstance(self.value, Iterable):
            yield from self.value

    def __str__(self) -> str:
        return f'Value({self.value!r})'


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing absence of a value.

    This is a singleton - use the `Nothing` constant or `as_none()` instead
    of instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.unwrap_or(0)
        0
    """

    def _absence_error(self) -> NoneError:
        return NoneError()

    def is_value(self) -> TypeIs[Value[Any]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the maybe is NothingType.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise the absence error.

        Raises:
            NoneError: Always; NotFoundError for the NotFound variant.
        """
        raise self._absence_error()

    def unwrap_or[T](self, alt: T) -> T:
        """Return the alternative value."""
        return alt

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return the alternative value."""
        return f()

    def unwrap_or_none(self) -> None:
        """Return None."""
        return None

    def unwrap_or_throw(self, err: Raisable | None = None) -> NoReturn:
        """Raise err, or the absence error when err is not given.

        Args:
            err: Exception instance or class to raise.

        Raises:
            BaseException: err if given, else NoneError or NotFoundError.
        """
        if err is None:
            raise self._absence_error()
        raise err

    def assert_is_value(self, msg: str | None = None) -> NoReturn:
        """Raise AssertionError since no value is present."""
        raise AssertionError(msg or f'Expected a value, got {self}')

    def assert_is_none(self, msg: str | None = None) -> NothingType:  # noqa: ARG002
        """Return self since this is Nothing."""
        return self

    def or_[T](self, other: Maybe[T]) -> Maybe[T]:
        """Return other since no value is present."""
        return other

    def or_else[T](self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Return the Maybe produced by f."""
        return f()

    def and_[U](self, other: Maybe[U]) -> NothingType:  # noqa: ARG002
        """Return self untouched since no value is present."""
        return self

    def and_then[T, U](self, f: Callable[[T], Maybe[U]]) -> NothingType:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def map[T, U](self, f: Callable[[T], U]) -> NothingType:  # noqa: ARG002
        """Return self since there's no value to map."""
        return self

    def map_or[T, U](self, f: Callable[[T], U], alt: U) -> Value[U]:  # noqa: ARG002
        """Return Value(alt)."""
        return Value(alt)

    def map_or_else[T, U](self, f: Callable[[T], U], alt_f: Callable[[], U]) -> Value[U]:  # noqa: ARG002
        """Return Value(alt_f())."""
        return Value(alt_f())

    def filter[T](self, predicate: Callable[[T], bool]) -> NothingType:  # noqa: ARG002
        """Return self without calling the predicate."""
        return self

    def to_result[E](self, error: E = _MISSING) -> Error[E] | Error[NoneError]:
        """Convert to Result, returning Error(error).

        Args:
            error: The error payload, None included. Defaults to a fresh
                NoneError (NotFoundError for the NotFound variant).
        """
        from maybe_result.result import Error

        if error is _MISSING:
            return Error(self._absence_error())
        return Error(error)

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __str__(self) -> str:
        return 'None'


class NotFound(NothingType, frozen=True, gc=False):
    """Absence with lookup context.

    Behaves like Nothing, except that the default unwrap error is a
    NotFoundError whose message names what was looked up.

    Examples:
        >>> str(not_found('widget', '42'))
        'NotFound(widget 42)'
    """

    what: tuple[str, ...] = ()

    def _absence_error(self) -> NotFoundError:
        return NotFoundError(*self.what)

    def __str__(self) -> str:
        return f'NotFound({" ".join(self.what)})'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""

Empty: Value[None] = Value(None)
"""Singleton Value for operations that succeed with no meaningful payload."""

type Maybe[T] = Value[T] | NothingType


def with_value[T](value: T) -> Value[T]:
    """Wrap a present value, including falsy values and None."""
    return Value(value)


def wrap[T](value: T | None) -> Maybe[T]:
    """Return Nothing if value is None, else Value(value)."""
    if value is None:
        return Nothing
    return Value(value)


def not_found(*what: str) -> NotFound:
    """Return an absence that remembers what was being looked up."""
    return NotFound(what)


def as_none() -> NothingType:
    """Return the Nothing singleton."""
    return Nothing


def is_maybe(obj: object) -> TypeIs[Maybe[Any]]:
    """Return True if obj is a Value or an absence variant."""
    return isinstance(obj, Value | NothingType)


def all_or_none[T](*maybes: Maybe[T]) -> Maybe[list[T]]:
    """Collect the payloads of all Values, or return the first absence.

    Short-circuits on the first absence, which is returned as-is so that a
    NotFound keeps its lookup context.

    Examples:
        >>> all_or_none(Value(1), Value(2))
        Value(value=[1, 2])
        >>> all_or_none(Value(1), Nothing, Value(2))
        NothingType()
    """
    values: list[T] = []
    for m in maybes:
        match m:
            case Value(value=v):
                values.append(v)
            case _:
                return m
    return Value(values)


def all_values[T](*maybes: Maybe[T]) -> list[T]:
    """Return the payloads of all Values in order, skipping absences."""
    return [m.value for m in maybes if isinstance(m, Value)]


def any[T](*maybes: Maybe[T]) -> Maybe[T]:  # noqa: A001
    """Return the first Value, or Nothing if there is none."""
    for m in maybes:
        if isinstance(m, Value):
            return m
    return Nothing
