"""@safe and @safe_async decorators for returning Result instead of raising."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from maybe_result.result import Result, wrap, wrap_async

__all__ = ['safe', 'safe_async']


@overload
def safe[**P, T](
    func: Callable[P, T],
) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def safe[**P, T](
    func: Callable[P, T] | None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that returns Okay(value) on return and Error(exception) on raise.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(catch=(ValueError, TypeError))
        def specific(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        catch: Exception types to capture. Defaults to the configured types.

    Returns:
        A wrapped function that returns Result[T, E] instead of T.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Okay(value=5.0)
        divide(10, 0)
        # Error(error=ZeroDivisionError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        return wrap(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def safe_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[Result[T, Exception]]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[Result[T, Any]]]]: ...


def safe_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    catch: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async decorator that returns Okay(value) on return and Error(exception) on raise.

    Can be used with or without arguments:
        @safe_async
        async def risky(): ...

        @safe_async(catch=(ValueError, TypeError))
        async def specific(): ...

    Args:
        func: The async function to wrap (when used without parentheses).
        catch: Exception types to capture. Defaults to the configured types.

    Returns:
        A wrapped async function that returns Result[T, E] instead of T.
    """

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[T, Any]:
        return await wrap_async(lambda: wrapped(*args, **kwargs), catch=catch)

    if func is not None:
        return wrapper(func)
    return wrapper
