"""Error types raised by the throwing accessors of Maybe and Result."""

from __future__ import annotations

from typing import Any

__all__ = [
    'NoneError',
    'NotFoundError',
    'UnwrapError',
]


class NoneError(Exception):
    """Raised when unwrapping an absent Maybe without a fallback."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or 'Failed to unwrap: no value')


class NotFoundError(NoneError):
    """Raised when unwrapping a NotFound Maybe.

    Carries the lookup context and HTTP-style status fields so that web
    frameworks inspecting raised errors map it to a 404 response.
    """

    status = 404
    status_code = 404

    def __init__(self, *what: str) -> None:
        self.what = what
        super().__init__(f'Not found: {" ".join(what)}' if what else 'Not found')


class UnwrapError(Exception):
    """Raised when unwrapping an Error whose payload is not an exception."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'Called unwrap on Error: {error!r}')
