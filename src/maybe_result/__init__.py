"""maybe-result: immutable Maybe and Result values for Python 3.13+.

Flat imports (preferred):
    from maybe_result import Maybe, Value, Nothing, with_value, not_found
    from maybe_result import Result, Okay, Error, okay, error, safe

Namespace imports (helpers whose names would clash when flattened):
    from maybe_result import maybe, result
    maybe.wrap(x), maybe.any(...), result.all(...), result.wrap(f)
"""

from maybe_result import maybe, result
from maybe_result._config import LibraryConfig, get_config, init
from maybe_result._logging import configure_logging
from maybe_result.decorators import safe, safe_async
from maybe_result.errors import NoneError, NotFoundError, UnwrapError
from maybe_result.maybe import (
    Empty,
    Maybe,
    NotFound,
    Nothing,
    NothingType,
    Value,
    all_or_none,
    all_values,
    as_none,
    is_maybe,
    not_found,
    with_value,
)
from maybe_result.result import (
    Error,
    Okay,
    OkayVoid,
    Result,
    error,
    is_result,
    okay,
    okay_void,
)

__all__ = [
    'Empty',
    'Error',
    'LibraryConfig',
    'Maybe',
    'NoneError',
    'NotFound',
    'NotFoundError',
    'Nothing',
    'NothingType',
    'Okay',
    'OkayVoid',
    'Result',
    'UnwrapError',
    'Value',
    'all_or_none',
    'all_values',
    'as_none',
    'configure_logging',
    'error',
    'get_config',
    'init',
    'is_maybe',
    'is_result',
    'maybe',
    'not_found',
    'okay',
    'okay_void',
    'result',
    'safe',
    'safe_async',
    'with_value',
]
