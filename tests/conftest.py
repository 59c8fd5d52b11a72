"""Pytest configuration and shared fixtures for maybe-result tests."""

import logging

import pytest
from maybe_result import _config


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from an unconfigured, silent library."""
    monkeypatch.delenv('MAYBE_RESULT_LOG_LEVEL', raising=False)
    monkeypatch.delenv('MAYBE_RESULT_JSON_LOGS', raising=False)
    _config.reset()
    yield
    _config.reset()
    package_logger = logging.getLogger('maybe_result')
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


@pytest.fixture
def counter():
    """Callable that counts its invocations and returns a fixed value."""

    class Counter:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, *args, **kwargs):
            self.calls += 1
            return self.returns

        returns = None

    return Counter()


@pytest.fixture
def sample_value():
    """Sample Value for testing."""
    from maybe_result import Value

    return Value('hello')


@pytest.fixture
def sample_not_found():
    """Sample NotFound for testing."""
    from maybe_result import not_found

    return not_found('widget', '42')


@pytest.fixture
def sample_okay():
    """Sample Okay for testing."""
    from maybe_result import Okay

    return Okay(42)


@pytest.fixture
def sample_error():
    """Sample Error for testing."""
    from maybe_result import Error

    return Error(ValueError('test error'))
