"""Tagged: attach a string tag to arbitrary content."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['Tagged']


class Tagged[T](msgspec.Struct, frozen=True, gc=False):
    """A value carried alongside a tag describing it.

    Examples:
        >>> str(Tagged.of('user', 42))
        'Tagged(user, 42)'
    """

    tag: str
    content: T

    @staticmethod
    def of[V](tag: str, content: V) -> Tagged[V]:
        return Tagged(tag, content)

    def map[U](self, f: Callable[[T], U]) -> Tagged[U]:
        """Transform the content, keeping the tag."""
        return Tagged(self.tag, f(self.content))

    def __str__(self) -> str:
        return f'Tagged({self.tag}, {self.content})'
