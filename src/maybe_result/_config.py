"""Library configuration: LibraryConfig, init, and environment defaults."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from maybe_result._logging import configure_logging

__all__ = [
    'LibraryConfig',
    'get_config',
    'init',
    'reset',
]

_FALSY = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class LibraryConfig:
    """Configuration for maybe-result.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Emit JSON logs when True, console output otherwise.
        catch: Exception types captured by result.wrap/wrap_async by default.
    """

    log_level: str | None = None
    json_logs: bool = True
    catch: tuple[type[BaseException], ...] = (Exception,)


_config: LibraryConfig | None = None


def _is_known_level(level: str) -> bool:
    return isinstance(logging.getLevelName(level), int)


def _detect_log_level() -> str | None:
    """Read MAYBE_RESULT_LOG_LEVEL, ignoring unknown level names."""
    level = os.environ.get('MAYBE_RESULT_LOG_LEVEL', '').strip().upper()
    if not level:
        return None
    if not _is_known_level(level):
        logging.getLogger(__name__).warning("Unknown MAYBE_RESULT_LOG_LEVEL value '%s', logging stays off", level)
        return None
    return level


def _detect_json_logs() -> bool:
    return os.environ.get('MAYBE_RESULT_JSON_LOGS', '1').strip().lower() not in _FALSY


def init(
    log_level: str | None = None,
    *,
    json_logs: bool | None = None,
    catch: tuple[type[BaseException], ...] | None = None,
) -> LibraryConfig:
    """Initialize maybe-result with the given configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            MAYBE_RESULT_LOG_LEVEL if None; logging stays off if unset.
        json_logs: JSON or console logs. Read from MAYBE_RESULT_JSON_LOGS if None.
        catch: Exception types that result.wrap captures by default.

    Returns:
        The LibraryConfig that was set.

    Raises:
        ValueError: If log_level is not a known logging level name.

    Example:
        ```python
        from maybe_result import init

        init(log_level='DEBUG', json_logs=False)
        init(catch=(ValueError, LookupError))
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is None:
        resolved_level = _detect_log_level()
    else:
        resolved_level = log_level.strip().upper()
        if not _is_known_level(resolved_level):
            msg = f"Unknown log level '{log_level}'"
            raise ValueError(msg)

    _config = LibraryConfig(
        log_level=resolved_level,
        json_logs=_detect_json_logs() if json_logs is None else json_logs,
        catch=catch if catch is not None else (Exception,),
    )

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=_config.json_logs)

    return _config


def get_config() -> LibraryConfig:
    """Get the current configuration, initializing from the environment on first use."""
    if _config is None:
        return init()
    return _config


def reset() -> None:
    """Forget the current configuration so the next get_config() re-reads the environment."""
    global _config  # noqa: PLW0603
    _config = None
