"""Writer type: a value paired with an accumulated log of messages."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['Writer', 'tell']


class Writer[T](msgspec.Struct, frozen=True, gc=False):
    """A value together with the log entries produced while computing it.

    Logs are an immutable tuple of strings. flat_map appends the
    continuation's entries after this writer's entries.

    Examples:
        >>> w = Writer.of(5, 'start').flat_map(lambda x: Writer.of(x * 2, ' doubled'))
        >>> w.value, w.log
        (10, 'start doubled')
    """

    value: T
    logs: tuple[str, ...] = ()

    @staticmethod
    def of[V](value: V, log: str = '') -> Writer[V]:
        """Wrap value with a single log entry, or none if log is empty."""
        return Writer(value, (log,) if log else ())

    @staticmethod
    def tell(message: str) -> Writer[None]:
        """Record a message without producing a value."""
        return Writer(None, (message,) if message else ())

    @property
    def log(self) -> str:
        """All entries joined into one string."""
        return ''.join(self.logs)

    def map[U](self, f: Callable[[T], U]) -> Writer[U]:
        """Transform the value, keeping the log."""
        return Writer(f(self.value), self.logs)

    def flat_map[U](self, f: Callable[[T], Writer[U]]) -> Writer[U]:
        """Sequence a continuation, appending its log after this one."""
        result = f(self.value)
        return Writer(result.value, (*self.logs, *result.logs))

    and_then = flat_map


def tell(message: str) -> Writer[None]:
    """Module-level alias for Writer.tell()."""
    return Writer.tell(message)
