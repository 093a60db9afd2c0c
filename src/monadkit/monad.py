"""Inner-monad descriptors and monoids.

A transformer never inspects the monad it wraps. Everything it needs to know
about the inner monad M is passed in explicitly as a MonadDescriptor:

    of(a)           wrap a plain value into M
    flat_map(m, f)  sequence m into a continuation returning M
    map(m, f)       optional; derived from flat_map + of when absent

Any value exposing this triple can sit under a transformer, including another
transformer (every transformer factory exposes its own `descriptor`).

Example:
    ```python
    from monadkit.monad import OPTION, fmap
    from monadkit.types import Some

    fmap(OPTION, Some(2), lambda x: x + 1)  # Some(value=3)
    ```
"""

from __future__ import annotations

import copy
import functools
import operator
from collections.abc import Callable, Iterable
from typing import Any

import msgspec

from monadkit.errors import MalformedDescriptorError
from monadkit.types.option import Some
from monadkit.types.reader import Reader
from monadkit.types.result import Ok
from monadkit.types.writer import Writer

__all__ = [
    'IDENTITY',
    'LIST_MONOID',
    'OPTION',
    'PRODUCT_MONOID',
    'READER',
    'RESULT',
    'STRING_MONOID',
    'SUM_MONOID',
    'TUPLE_MONOID',
    'WRITER',
    'MonadDescriptor',
    'Monoid',
    'bind_method',
    'fmap',
    'map_method',
    'map_via_flat_map',
]


class MonadDescriptor(msgspec.Struct, frozen=True):
    """The operations a transformer needs from its inner monad.

    Attributes:
        of: Wrap a plain value into the inner monad.
        flat_map: Bind an inner monadic value to a continuation.
        map: Optional functor map. When None, transformers fall back to
            map_via_flat_map. If given, it must agree with that fallback.
        name: Label used in reprs and log events.

    The monad laws for `of` and `flat_map` are the caller's responsibility and
    are not checked here (see monadkit.laws for an opt-in checker). Only
    callability is validated at construction.
    """

    of: Callable[[Any], Any]
    flat_map: Callable[[Any, Callable[[Any], Any]], Any]
    map: Callable[[Any, Callable[[Any], Any]], Any] | None = None
    name: str = 'anonymous'

    def __post_init__(self) -> None:
        owner = f'MonadDescriptor({self.name})'
        if not callable(self.of):
            raise MalformedDescriptorError(owner, 'of')
        if not callable(self.flat_map):
            raise MalformedDescriptorError(owner, 'flat_map')
        if self.map is not None and not callable(self.map):
            raise MalformedDescriptorError(owner, 'map')

    def without_map(self) -> MonadDescriptor:
        """Return a copy that forces the flat_map + of fallback."""
        return MonadDescriptor(of=self.of, flat_map=self.flat_map, name=f'{self.name}[no-map]')


class Monoid[W](msgspec.Struct, frozen=True):
    """An associative concat with an identity element.

    `concat` must be associative and `empty` must be its two-sided identity.
    WriterT relies on both for its log to be independent of how a chain is
    grouped.
    """

    empty: W
    concat: Callable[[W, W], W]
    name: str = 'anonymous'

    def __post_init__(self) -> None:
        if not callable(self.concat):
            raise MalformedDescriptorError(f'Monoid({self.name})', 'concat')

    def new_empty(self) -> W:
        """A copy of empty, so a mutable identity is never shared between logs."""
        return copy.copy(self.empty)

    def fold(self, values: Iterable[W]) -> W:
        """Combine values left to right, starting from a fresh empty."""
        return functools.reduce(self.concat, values, self.new_empty())


def map_via_flat_map(monad: MonadDescriptor, m: Any, f: Callable[[Any], Any]) -> Any:
    """Functor map derived from the descriptor's flat_map and of."""
    return monad.flat_map(m, lambda a: monad.of(f(a)))


def fmap(monad: MonadDescriptor, m: Any, f: Callable[[Any], Any]) -> Any:
    """Apply f inside m, preferring the descriptor's own map."""
    if monad.map is not None:
        return monad.map(m, f)
    return map_via_flat_map(monad, m, f)


def _identity(value: Any) -> Any:
    return value


def _apply(m: Any, f: Callable[[Any], Any]) -> Any:
    return f(m)


def bind_method(m: Any, f: Callable[[Any], Any]) -> Any:
    """flat_map for values that carry their own flat_map method."""
    return m.flat_map(f)


def map_method(m: Any, f: Callable[[Any], Any]) -> Any:
    """map for values that carry their own map method."""
    return m.map(f)


def _list_concat(a: list[Any], b: list[Any]) -> list[Any]:
    return [*a, *b]


# --- Built-in descriptors ---

IDENTITY = MonadDescriptor(of=_identity, flat_map=_apply, map=_apply, name='Identity')
"""The trivial monad: M[A] is A itself."""

OPTION = MonadDescriptor(of=Some, flat_map=bind_method, map=map_method, name='Option')
RESULT = MonadDescriptor(of=Ok, flat_map=bind_method, map=map_method, name='Result')
READER = MonadDescriptor(of=Reader.of, flat_map=bind_method, map=map_method, name='Reader')
WRITER = MonadDescriptor(of=Writer.of, flat_map=bind_method, map=map_method, name='Writer')


# --- Built-in monoids ---

STRING_MONOID: Monoid[str] = Monoid('', operator.add, name='str')
TUPLE_MONOID: Monoid[tuple[Any, ...]] = Monoid((), operator.add, name='tuple')
LIST_MONOID: Monoid[list[Any]] = Monoid([], _list_concat, name='list')
SUM_MONOID: Monoid[int] = Monoid(0, operator.add, name='sum')
PRODUCT_MONOID: Monoid[int] = Monoid(1, operator.mul, name='product')
