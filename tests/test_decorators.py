"""Tests for decorators: @safe and @safe_async."""

import pytest
from maybe_result import Error, Okay, safe, safe_async


class TestSafeDecorator:
    """Tests for @safe decorator."""

    def test_safe_returns_okay_on_success(self):
        """@safe wraps a successful return in Okay."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        assert divide(10, 2) == Okay(5.0)

    def test_safe_returns_error_on_exception(self):
        """@safe catches the exception and returns Error."""

        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        r = divide(10, 0)
        assert isinstance(r, Error)
        assert isinstance(r.error, ZeroDivisionError)

    def test_safe_with_catch_param(self):
        """@safe(catch=...) catches only the specified exceptions."""

        @safe(catch=(ValueError,))
        def risky(x: int) -> int:
            if x < 0:
                raise ValueError('negative')
            if x == 0:
                raise TypeError('zero')
            return x

        assert risky(5) == Okay(5)
        assert isinstance(risky(-1).error, ValueError)

        with pytest.raises(TypeError):
            risky(0)

    def test_safe_preserves_function_name(self):
        """@safe preserves function metadata."""

        @safe
        def my_function():
            """Do nothing."""

        assert my_function.__name__ == 'my_function'
        assert my_function.__doc__ == 'Do nothing.'

    def test_safe_with_kwargs(self):
        """@safe passes keyword arguments through."""

        @safe
        def greet(name: str, greeting: str = 'Hello') -> str:
            return f'{greeting}, {name}!'

        assert greet('World') == Okay('Hello, World!')
        assert greet(name='Python', greeting='Hi') == Okay('Hi, Python!')

    def test_safe_on_method(self):
        """@safe works on methods."""

        class Parser:
            base = 10

            @safe
            def parse(self, text: str) -> int:
                return int(text, self.base)

        assert Parser().parse('12') == Okay(12)
        assert isinstance(Parser().parse('zz').error, ValueError)


class TestSafeAsyncDecorator:
    """Tests for @safe_async decorator."""

    @pytest.mark.asyncio
    async def test_safe_async_returns_okay(self):
        """@safe_async wraps a successful return in Okay."""

        @safe_async
        async def fetch(x: int) -> int:
            return x * 2

        assert await fetch(21) == Okay(42)

    @pytest.mark.asyncio
    async def test_safe_async_returns_error(self):
        """@safe_async catches the exception and returns Error."""

        @safe_async
        async def fetch() -> int:
            raise ConnectionError('refused')

        r = await fetch()
        assert isinstance(r.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_safe_async_with_catch_param(self):
        """@safe_async(catch=...) catches only the specified exceptions."""

        @safe_async(catch=(ValueError,))
        async def risky() -> int:
            raise TypeError('wrong')

        with pytest.raises(TypeError):
            await risky()

    def test_safe_async_preserves_function_name(self):
        """@safe_async preserves function metadata."""

        @safe_async
        async def my_async_function():
            pass

        assert my_async_function.__name__ == 'my_async_function'
