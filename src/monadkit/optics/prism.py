"""Partial, composable accessors: the focus may be absent."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import msgspec

from monadkit.types.option import Nothing, NothingType, Option, Some, from_nullable

__all__ = ['Prism']


def _as_option(value: Any) -> Option[Any]:
    if isinstance(value, Some | NothingType):
        return value
    return from_nullable(value)


class Prism[S, A](msgspec.Struct, frozen=True):
    """Focus on a part A that may or may not exist inside S.

    `get` always returns an Option. `set` and `modify` return s unchanged when
    the focus is absent, and a composed prism is absent as soon as any stage is.

    Example:
        ```python
        city = Prism.key('address').compose(Prism.key('city'))
        city.get({'address': {'city': 'Oslo'}})  # Some(value='Oslo')
        city.get({})  # NothingType()
        city.set('Rome', {})  # {}
        ```
    """

    getter: Callable[[S], Any]
    setter: Callable[[A, S], S]

    @classmethod
    def of(cls, get: Callable[[S], Any], set: Callable[[A, S], S]) -> Prism[S, A]:  # noqa: A002
        """Build a prism. get may return None for absence, or an Option."""
        return cls(get, set)

    @classmethod
    def key(cls, k: Any) -> Prism[Mapping[Any, Any], Any]:
        """Prism onto a mapping key that may be missing."""
        return cls(lambda s: Some(s[k]) if k in s else Nothing, lambda a, s: {**s, k: a})

    @classmethod
    def instance(cls, type_: type[A]) -> Prism[Any, A]:
        """Prism onto values of one type; setting replaces the whole value."""
        return cls(lambda s: Some(s) if isinstance(s, type_) else Nothing, lambda a, _s: a)

    def get(self, s: S) -> Option[A]:
        return _as_option(self.getter(s))

    def get_or_else(self, s: S, default: A) -> A:
        return self.get(s).unwrap_or(default)

    def set(self, a: A, s: S) -> S:
        if self.get(s).is_none():
            return s
        return self.setter(a, s)

    def modify(self, f: Callable[[A], A], s: S) -> S:
        """Replace a present focus with f(focus)."""
        match self.get(s):
            case Some(value):
                return self.setter(f(value), s)
            case _:
                return s

    def compose[B](self, other: Prism[A, B]) -> Prism[S, B]:
        """Focus through this prism, then through other."""
        outer, inner = self, other

        def get(s: S) -> Option[B]:
            return outer.get(s).flat_map(inner.get)

        def set(b: B, s: S) -> S:  # noqa: A001
            match outer.get(s):
                case Some(a):
                    return outer.set(inner.set(b, a), s)
                case _:
                    return s

        return Prism(get, set)
