"""MaybeT: optional values layered over an arbitrary inner monad.

A MaybeT wraps a single inner value of shape M[Option[A]]. Absence
short-circuits: once a step yields Nothing, no later continuation is called,
and run() returns Nothing wrapped in whatever effects M accumulated up to
that point.

Example:
    ```python
    from monadkit import IDENTITY, maybe_t

    MT = maybe_t(IDENTITY)
    MT.of(5).map(lambda x: x * 2).run()  # Some(value=10)
    MT.none().flat_map(lambda x: MT.of(x + 1)).run()  # NothingType()
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, assert_never

import msgspec

from monadkit.monad import MonadDescriptor, fmap
from monadkit.transformer._base import log_factory_created, stacked_descriptor
from monadkit.types.option import Nothing, NothingType, Option, Some

__all__ = ['MaybeT', 'MaybeTFactory', 'maybe_t']


class MaybeT[A](msgspec.Struct, frozen=True):
    """An M[Option[A]] with map/flat_map acting on the A inside.

    Attributes:
        inner: The wrapped M[Option[A]].
        monad: Descriptor of M.
    """

    inner: Any
    monad: MonadDescriptor

    def run(self) -> Any:
        """Return the wrapped M[Option[A]]."""
        return self.inner

    def map[B](self, f: Callable[[A], B]) -> MaybeT[B]:
        """Apply f to the value when present; Nothing passes through."""

        def step(option: Option[A]) -> Option[B]:
            match option:
                case Some(value):
                    return Some(f(value))
                case NothingType():
                    return option
                case _:
                    assert_never(option)

        return MaybeT(fmap(self.monad, self.inner, step), self.monad)

    def flat_map[B](self, f: Callable[[A], MaybeT[B]]) -> MaybeT[B]:
        """Sequence a MaybeT-producing continuation.

        On Some(a) the result is f(a).run(), so effects of M from both steps
        are kept. On Nothing, f is never called.
        """
        monad = self.monad

        def step(option: Option[A]) -> Any:
            match option:
                case Some(value):
                    return f(value).run()
                case NothingType():
                    return monad.of(Nothing)
                case _:
                    assert_never(option)

        return MaybeT(monad.flat_map(self.inner, step), monad)

    def or_else(self, f: Callable[[], MaybeT[A]]) -> MaybeT[A]:
        """Replace an absent value with the computation f() returns."""
        monad = self.monad

        def step(option: Option[A]) -> Any:
            match option:
                case Some():
                    return monad.of(option)
                case NothingType():
                    return f().run()
                case _:
                    assert_never(option)

        return MaybeT(monad.flat_map(self.inner, step), monad)

    def unwrap_or(self, default: A) -> Any:
        """Collapse the optional layer, returning M[A] with default for Nothing."""
        return fmap(self.monad, self.inner, lambda option: option.unwrap_or(default))


class MaybeTFactory(msgspec.Struct, frozen=True):
    """Constructors for MaybeT over one inner monad."""

    monad: MonadDescriptor

    def of[A](self, value: A) -> MaybeT[A]:
        """Wrap a plain value: monad.of(Some(value))."""
        return MaybeT(self.monad.of(Some(value)), self.monad)

    def from_[A](self, inner: Any) -> MaybeT[A]:
        """Wrap an existing M[Option[A]] as-is."""
        return MaybeT(inner, self.monad)

    def lift[A](self, inner: Any) -> MaybeT[A]:
        """Turn M[A] into M[Option[A]] by marking every value present."""
        return MaybeT(fmap(self.monad, inner, Some), self.monad)

    def none(self) -> MaybeT[Any]:
        """An absent value: monad.of(Nothing)."""
        return MaybeT(self.monad.of(Nothing), self.monad)

    @property
    def descriptor(self) -> MonadDescriptor:
        """This factory's MaybeT instances described as an inner monad."""
        return stacked_descriptor('MaybeT', self.monad, self.of)


def maybe_t(monad: MonadDescriptor) -> MaybeTFactory:
    """Create a MaybeT factory over the inner monad described by `monad`."""
    log_factory_created('MaybeT', monad)
    return MaybeTFactory(monad)
