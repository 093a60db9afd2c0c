"""Total, composable accessors into immutable structures."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping, Sequence
from typing import Any

import msgspec

__all__ = ['Lens']


def _replace_attr(s: Any, name: str, value: Any) -> Any:
    """Copy s with one attribute changed, never mutating s."""
    if isinstance(s, msgspec.Struct):
        return msgspec.structs.replace(s, **{name: value})
    if dataclasses.is_dataclass(s) and not isinstance(s, type):
        return dataclasses.replace(s, **{name: value})
    if isinstance(s, tuple) and hasattr(s, '_replace'):
        return s._replace(**{name: value})
    msg = f'Cannot replace attribute {name!r} on {type(s).__name__}'
    raise TypeError(msg)


def _replace_index(s: Sequence[Any], i: int, value: Any) -> Any:
    items = list(s)
    items[i] = value
    return tuple(items) if isinstance(s, tuple) else items


class Lens[S, A](msgspec.Struct, frozen=True):
    """Focus on a part A that always exists inside a whole S.

    `setter` must not mutate its input; it returns a new S.

    Example:
        ```python
        user = Lens.key('user')
        name = user.compose(Lens.key('name'))
        name.get({'user': {'name': 'ada'}})  # 'ada'
        name.set('bob', {'user': {'name': 'ada'}})  # {'user': {'name': 'bob'}}
        ```
    """

    getter: Callable[[S], A]
    setter: Callable[[A, S], S]

    @classmethod
    def of(cls, get: Callable[[S], A], set: Callable[[A, S], S]) -> Lens[S, A]:  # noqa: A002
        """Build a lens from a getter and a setter."""
        return cls(get, set)

    @classmethod
    def attr(cls, name: str) -> Lens[Any, Any]:
        """Lens onto an attribute of a msgspec Struct, dataclass or named tuple."""
        return cls(lambda s: getattr(s, name), lambda a, s: _replace_attr(s, name, a))

    @classmethod
    def key(cls, k: Any) -> Lens[Mapping[Any, Any], Any]:
        """Lens onto a mapping key. Setting builds a new dict."""
        return cls(lambda s: s[k], lambda a, s: {**s, k: a})

    @classmethod
    def index(cls, i: int) -> Lens[Sequence[Any], Any]:
        """Lens onto a list or tuple position. Setting copies the sequence."""
        return cls(lambda s: s[i], lambda a, s: _replace_index(s, i, a))

    def get(self, s: S) -> A:
        return self.getter(s)

    def set(self, a: A, s: S) -> S:
        return self.setter(a, s)

    def modify(self, f: Callable[[A], A], s: S) -> S:
        """Replace the focus with f(focus)."""
        return self.setter(f(self.getter(s)), s)

    def compose[B](self, other: Lens[A, B]) -> Lens[S, B]:
        """Focus through this lens, then through other."""
        outer, inner = self, other

        def get(s: S) -> B:
            return inner.get(outer.get(s))

        def set(b: B, s: S) -> S:  # noqa: A001
            return outer.set(inner.set(b, outer.get(s)), s)

        return Lens(get, set)
