"""Result type: Okay[T] | Error[E] for operations that may fail.

The error payload can be any value, not only an exception:

    ```python
    from maybe_result import result

    def parse_port(text: str) -> result.Result[int, str]:
        if not text.isdigit():
            return result.error(f'not a number: {text!r}')
        return result.okay(int(text))

    parse_port('80').map(lambda p: p + 1)          # Okay(value=81)
    parse_port('x').map_error(str.upper)           # Error(error="NOT A NUMBER: 'X'")
    result.wrap(lambda: int('x'))                  # Error(error=ValueError(...))
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Iterator
from inspect import isawaitable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from maybe_result._config import get_config
from maybe_result._logging import get_logger
from maybe_result.errors import UnwrapError

if TYPE_CHECKING:
    from maybe_result.maybe import NothingType, Value

__all__ = [
    'Error',
    'Okay',
    'OkayVoid',
    'Result',
    'all',
    'any',
    'error',
    'is_result',
    'okay',
    'okay_void',
    'wrap',
    'wrap_async',
]

type Raisable = BaseException | type[BaseException]

_logger = get_logger(__name__)


class Okay[T](msgspec.Struct, frozen=True):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Okay(42).unwrap()
        42
        >>> Okay(21).map(lambda x: x * 2)
        Okay(value=42)
    """

    value: T

    def is_okay(self) -> TypeIs[Okay[T]]:
        """Return True since this is Okay.

        This method provides type narrowing - after checking is_okay(),
        the type checker knows the result is Okay[T].
        """
        return True

    def is_error(self) -> TypeIs[Error[Any]]:
        """Return False since this is Okay."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, alt: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the alternative."""
        return self.value

    def unwrap_or_else(self, f: Callable[[Any], T]) -> T:  # noqa: ARG002
        """Return the contained value without calling the fallback."""
        return self.value

    def unwrap_or_none(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or_throw(self, err: Raisable | None = None) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the error to raise."""
        return self.value

    def assert_is_okay(self, msg: str | None = None) -> T:  # noqa: ARG002
        """Return the contained value."""
        return self.value

    def assert_is_error(self, msg: str | None = None) -> NoReturn:
        """Raise AssertionError since this is Okay.

        Args:
            msg: Optional message; the success value is appended to it.

        Raises:
            AssertionError: Always.
        """
        raise AssertionError(f'{msg or "Expected an error"}: {self}')

    def or_[F](self, other: Result[T, F]) -> Okay[T]:  # noqa: ARG002
        """Return self since this is Okay."""
        return self

    def or_else[F](self, f: Callable[[Any], Result[T, F]]) -> Okay[T]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def and_[U, E](self, other: Result[U, E]) -> Result[U, E]:
        """Return other since this is Okay."""
        return other

    def and_then[U, E](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def map[U](self, f: Callable[[T], U]) -> Okay[U]:
        """Apply a function to the contained value and wrap the result in Okay."""
        return Okay(f(self.value))

    def map_or[U](self, f: Callable[[T], U], alt: U) -> Okay[U]:  # noqa: ARG002
        """Return Okay(f(value)); the alternative is unused."""
        return Okay(f(self.value))

    def map_or_else[U](self, f: Callable[[T], U], alt_f: Callable[[Any], U]) -> Okay[U]:  # noqa: ARG002
        """Return Okay(f(value)) without calling alt_f."""
        return Okay(f(self.value))

    def map_error[F](self, f: Callable[[Any], F]) -> Okay[T]:  # noqa: ARG002
        """Return self unchanged since this is Okay."""
        return self

    def to_maybe(self) -> Value[T]:
        """Convert to Maybe, returning Value(value)."""
        from maybe_result.maybe import Value

        return Value(self.value)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the contained value if it is iterable.

        A non-iterable payload yields nothing, which makes it
        indistinguishable from an Error under iteration.
        """
        if isinstance(self.value, Iterable):
            yield from self.value

    def __str__(self) -> str:
        return f'Okay({self.value!r})'


class Error[E](msgspec.Struct, frozen=True):
    """Error variant of Result containing an error payload of type E.

    The payload is never interpreted; only map_error transforms it.

    Examples:
        >>> Error('boom').is_error()
        True
        >>> Error('boom').unwrap_or(0)
        0
    """

    error: E

    def _exception(self) -> BaseException:
        if isinstance(self.error, BaseException):
            return self.error
        return UnwrapError(self.error)

    def is_okay(self) -> TypeIs[Okay[Any]]:
        """Return False since this is Error."""
        return False

    def is_error(self) -> TypeIs[Error[E]]:
        """Return True since this is Error.

        This method provides type narrowing - after checking is_error(),
        the type checker knows the result is Error[E].
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise the error payload.

        Raises:
            BaseException: The payload if it is an exception, else UnwrapError.
        """
        raise self._exception()

    def unwrap_or[T](self, alt: T) -> T:
        """Return the alternative value."""
        return alt

    def unwrap_or_else[T](self, f: Callable[[E], T]) -> T:
        """Compute the alternative value from the error payload."""
        return f(self.error)

    def unwrap_or_none(self) -> None:
        """Return None."""
        return None

    def unwrap_or_throw(self, err: Raisable | None = None) -> NoReturn:
        """Raise err, or the error payload itself when err is not given.

        Args:
            err: Exception instance or class to raise instead of the payload.

        Raises:
            BaseException: err if given; else the payload if it is an
                exception; else UnwrapError carrying the payload.
        """
        if err is None:
            raise self._exception()
        raise err

    def assert_is_okay(self, msg: str | None = None) -> NoReturn:
        """Raise AssertionError since this is Error."""
        raise AssertionError(msg or f'Expected a value, got {self}')

    def assert_is_error(self, msg: str | None = None) -> E:  # noqa: ARG002
        """Return the error payload."""
        return self.error

    def or_[T, F](self, other: Result[T, F]) -> Result[T, F]:
        """Return other since this is Error."""
        return other

    def or_else[T, F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Apply a recovery function to the error payload.

        Args:
            f: Function that takes the error and returns a new Result.

        Returns:
            The Result returned by f.
        """
        return f(self.error)

    def and_[U, F](self, other: Result[U, F]) -> Error[E]:  # noqa: ARG002
        """Return self since this is Error."""
        return self

    def and_then[T, U, F](self, f: Callable[[T], Result[U, F]]) -> Error[E]:  # noqa: ARG002
        """Return self without calling f."""
        return self

    def map[T, U](self, f: Callable[[T], U]) -> Error[E]:  # noqa: ARG002
        """Return self unchanged since this is Error."""
        return self

    def map_or[T, U](self, f: Callable[[T], U], alt: U) -> Okay[U]:  # noqa: ARG002
        """Return Okay(alt)."""
        return Okay(alt)

    def map_or_else[T, U](self, f: Callable[[T], U], alt_f: Callable[[E], U]) -> Okay[U]:  # noqa: ARG002
        """Return Okay(alt_f(error))."""
        return Okay(alt_f(self.error))

    def map_error[F](self, f: Callable[[E], F]) -> Error[F]:
        """Apply a function to the error payload and wrap the result in Error."""
        return Error(f(self.error))

    def to_maybe(self) -> NothingType:
        """Convert to Maybe, discarding the error payload."""
        from maybe_result.maybe import Nothing

        return Nothing

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __str__(self) -> str:
        return f'Error({self.error!r})'


OkayVoid: Okay[None] = Okay(None)
"""Singleton Okay for operations that succeed with no meaningful payload."""

type Result[T, E] = Okay[T] | Error[E]


def okay[T](value: T) -> Okay[T]:
    """Return Okay(value)."""
    return Okay(value)


def okay_void() -> Okay[None]:
    """Return the OkayVoid singleton."""
    return OkayVoid


def error[E](err: E) -> Error[E]:
    """Return Error(err)."""
    return Error(err)


def is_result(obj: object) -> TypeIs[Result[Any, Any]]:
    """Return True if obj is an Okay or an Error."""
    return isinstance(obj, Okay | Error)


def all[T, E](*results: Result[T, E]) -> Result[list[T], E]:  # noqa: A001
    """Collect the values of all Okays, or return the first Error.

    Short-circuits on the first Error encountered, left to right.

    Examples:
        >>> all(Okay(1), Okay(2))
        Okay(value=[1, 2])
        >>> all(Okay(1), Error('x'), Error('y'))
        Error(error='x')
    """
    values: list[T] = []
    for r in results:
        match r:
            case Okay(value=v):
                values.append(v)
            case _:
                return r
    return Okay(values)


def any[T, E](*results: Result[T, E]) -> Result[T, list[E]]:  # noqa: A001
    """Return the first Okay, or an Error holding every error payload.

    Unlike all(), which keeps only the first error, the failure case here
    reports all of them in order.

    Examples:
        >>> any(Error('x'), Okay(2))
        Okay(value=2)
        >>> any(Error('x'), Error('y'))
        Error(error=['x', 'y'])
    """
    errors: list[E] = []
    for r in results:
        match r:
            case Okay():
                return r
            case Error(error=e):
                errors.append(e)
    return Error(errors)


def _resolve_catch(catch: tuple[type[BaseException], ...] | None) -> tuple[type[BaseException], ...]:
    return catch if catch is not None else get_config().catch


def _captured(event: str, exc: BaseException) -> None:
    if get_config().log_level is not None:
        _logger.debug(event, error_type=type(exc).__name__)


def wrap[T](
    f: Callable[[], T],
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Result[T, Any]:
    """Call f and capture its outcome as a Result.

    Args:
        f: Zero-argument callable to invoke.
        catch: Exception types to capture. Defaults to the configured
            types, (Exception,) unless changed with init().

    Returns:
        Okay(return value), or Error(exception) with the raised exception
        placed in the payload unchanged.

    Example:
        ```python
        wrap(lambda: 42)                  # Okay(value=42)
        wrap(lambda: {}['missing'])       # Error(error=KeyError('missing'))
        ```
    """
    try:
        value = f()
    except _resolve_catch(catch) as e:
        _captured('result.wrap.captured', e)
        return Error(e)
    return Okay(value)


async def wrap_async[T](
    f: Awaitable[T] | Callable[[], Awaitable[T]],
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Result[T, Any]:
    """Await an asynchronous computation and capture its outcome as a Result.

    The computation is awaited exactly once. There are no retries or
    timeouts, and cancellation propagates unless explicitly listed in catch.

    Args:
        f: An awaitable, or a zero-argument callable returning one. A
            callable that raises before returning an awaitable is captured too.
        catch: Exception types to capture. Defaults to the configured types.

    Returns:
        Okay(result) if the awaitable completes, Error(exception) if it raises.

    Raises:
        TypeError: If the callable returns something that is not awaitable.

    Example:
        ```python
        async def fetch() -> bytes: ...

        outcome = await wrap_async(fetch)
        outcome = await wrap_async(fetch())
        ```
    """
    catching = _resolve_catch(catch)
    if isawaitable(f):
        awaitable = f
    else:
        try:
            awaitable = f()
        except catching as e:
            _captured('result.wrap_async.captured', e)
            return Error(e)
        if not isawaitable(awaitable):
            msg = f'wrap_async expected an awaitable, got {type(awaitable).__name__}'
            raise TypeError(msg)
    try:
        value = await awaitable
    except catching as e:
        _captured('result.wrap_async.captured', e)
        return Error(e)
    return Okay(value)
