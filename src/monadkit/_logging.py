"""Structured logging for monadkit.

The toolkit itself emits two events, both at DEBUG:

    transformer_factory_created  kind, monad, and monoid (WriterT only)
    law_violated                 law, left, right

Nothing else is logged: map, flat_map and run stay silent so that hot
monadic chains never pay for logging. Loggers returned by get_logger() drop
events below the stdlib logger's effective level before any processor runs,
so an application that never configures logging sees nothing.

configure_logging() routes structlog and stdlib records through one
ProcessorFormatter. Hooks registered with add_log_hook() see every event that
passes the level filter, which is how tests and callers observe the events
above without parsing rendered output.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from collections.abc import Callable

__all__ = [
    'FACTORY_CREATED',
    'LAW_VIOLATED',
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

FACTORY_CREATED = 'transformer_factory_created'
LAW_VIOLATED = 'law_violated'

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


class _HookDispatcher:
    """structlog processor handing each hook its own copy of the event."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        for hook in tuple(_log_hooks):
            try:
                hook(dict(event_dict))
            except Exception:  # noqa: BLE001, S112
                continue
        return event_dict


def _enrichers() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _HookDispatcher(),
    ]


def _logger_chain() -> list[Any]:
    """Processors for monadkit's own loggers, ending in the formatter handoff."""
    return [
        structlog.stdlib.filter_by_level,
        *_enrichers(),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ]


def _handler(json_output: bool) -> logging.Handler:
    renderer = (
        structlog.processors.JSONRenderer(default=repr)
        if json_output
        else structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_enrichers(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Install a single stderr handler on the root logger.

    Args:
        level: Logging level name. Use "DEBUG" to see monadkit's own events.
        json_output: Render JSON lines if True, colored console output otherwise.
    """
    structlog.configure(
        processors=_logger_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(_handler(json_output))
    root.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Return a level-filtered structlog logger named `name` (default "monadkit")."""
    return structlog.wrap_logger(
        logging.getLogger(name or 'monadkit'),
        processors=_logger_chain(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def add_log_hook(hook: LogHook) -> None:
    """Call `hook` with a copy of every event dict that passes the level filter."""
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    _log_hooks.clear()
