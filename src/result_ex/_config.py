"""Library configuration: ResultConfig, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from result_ex._logging import configure_logging

__all__ = [
    'ResultConfig',
    'get_config',
    'init',
]

_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


@dataclass(frozen=True)
class ResultConfig:
    """Configuration for result_ex.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = leave logging alone.
        json_logs: Render logs as JSON when True, console lines when False.
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: ResultConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from RESULT_EX_LOG_LEVEL, or None if unset."""
    env_level = os.environ.get('RESULT_EX_LOG_LEVEL', '').upper()
    if not env_level:
        return None
    return _validate_log_level(env_level, 'RESULT_EX_LOG_LEVEL')


def _validate_log_level(level: str, source: str) -> str:
    """Upper-case level, falling back to INFO with a warning if it is unknown."""
    level = level.upper()
    if level not in _LOG_LEVELS:
        logging.warning("Unknown %s value '%s', defaulting to INFO", source, level)
        return 'INFO'
    return level


def _detect_json_logs() -> bool:
    """Read the log format from RESULT_EX_LOG_FORMAT ("json" or "console")."""
    env_format = os.environ.get('RESULT_EX_LOG_FORMAT', '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown RESULT_EX_LOG_FORMAT value '%s', defaulting to json", env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> ResultConfig:
    """Initialize result_ex with the given configuration.

    Unset arguments are resolved from RESULT_EX_LOG_LEVEL and
    RESULT_EX_LOG_FORMAT. Logging is only configured when a level is known.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). None = from environment.
        json_logs: JSON (True) or console (False) output. None = from environment.

    Returns:
        The ResultConfig that was set.

    Example:
        ```python
        from result_ex import init

        init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = (
        _validate_log_level(log_level, 'log_level') if log_level is not None else _detect_log_level()
    )
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = ResultConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> ResultConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'result_ex not initialized. Call result_ex.init() first.'
        raise RuntimeError(msg)
    return _config
