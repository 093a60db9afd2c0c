"""Toolkit configuration: ToolkitConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from monadkit._logging import configure_logging

__all__ = [
    'ToolkitConfig',
    'get_config',
    'init',
]

LOG_LEVEL_ENV = 'MONADKIT_LOG_LEVEL'
LOG_FORMAT_ENV = 'MONADKIT_LOG_FORMAT'


@dataclass(frozen=True)
class ToolkitConfig:
    """Configuration for monadkit.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_logs: Render logs as JSON (True) or colored console lines (False).
    """

    log_level: str | None = None
    json_logs: bool = True


# Global configuration (set by init())
_config: ToolkitConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from MONADKIT_LOG_LEVEL, None when unset or blank."""
    level = os.environ.get(LOG_LEVEL_ENV, '').strip()
    return level.upper() or None


def _detect_json_logs() -> bool:
    """Detect log format from environment.

    MONADKIT_LOG_FORMAT is "json" (default) or "console".
    """
    env_format = os.environ.get(LOG_FORMAT_ENV, '').lower()
    if env_format == 'console':
        return False
    if env_format and env_format != 'json':
        logging.warning("Unknown %s value '%s', defaulting to json", LOG_FORMAT_ENV, env_format)
    return True


def init(
    log_level: str | None = None,
    json_logs: bool | None = None,
) -> ToolkitConfig:
    """Initialize monadkit with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            MONADKIT_LOG_LEVEL if None; stays silent if that is unset too.
        json_logs: JSON (True) or console (False) rendering. Read from
            MONADKIT_LOG_FORMAT if None.

    Returns:
        The ToolkitConfig that was set.

    Example:
        ```python
        import monadkit

        monadkit.init(log_level='DEBUG', json_logs=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_logs if json_logs is not None else _detect_json_logs()

    _config = ToolkitConfig(log_level=resolved_level, json_logs=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> ToolkitConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'monadkit not initialized. Call monadkit.init() first.'
        raise RuntimeError(msg)
    return _config
