"""ReaderT: environment-dependent computations over an arbitrary inner monad.

A ReaderT is a function env -> M[A]. Nothing runs until run(env); every step
of a flat_map chain receives the same env, and local() is the only way to
give a sub-computation a different one.

Example:
    ```python
    from monadkit import IDENTITY, reader_t

    RT = reader_t(IDENTITY)
    total = RT.from_(lambda env: env['x']).flat_map(
        lambda x: RT.from_(lambda env: x + env['y'])
    )
    total.run({'x': 2, 'y': 3})  # 5
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from monadkit.monad import MonadDescriptor, fmap
from monadkit.transformer._base import log_factory_created, stacked_descriptor

__all__ = ['ReaderT', 'ReaderTFactory', 'reader_t']


class ReaderT[R, A](msgspec.Struct, frozen=True):
    """A function from an environment R to M[A].

    Attributes:
        fn: The wrapped env -> M[A] function.
        monad: Descriptor of M.
    """

    fn: Callable[[R], Any]
    monad: MonadDescriptor

    def run(self, env: R) -> Any:
        """Supply the environment and return M[A]."""
        return self.fn(env)

    def map[B](self, f: Callable[[A], B]) -> ReaderT[R, B]:
        """Apply f to the value inside M once the environment is supplied."""
        fn, monad = self.fn, self.monad
        return ReaderT(lambda env: fmap(monad, fn(env), f), monad)

    def flat_map[B](self, f: Callable[[A], ReaderT[R, B]]) -> ReaderT[R, B]:
        """Sequence a ReaderT-producing continuation under the same env."""
        fn, monad = self.fn, self.monad
        return ReaderT(lambda env: monad.flat_map(fn(env), lambda a: f(a).run(env)), monad)

    def local(self, f: Callable[[R], R]) -> ReaderT[R, A]:
        """Run this computation against f(env) instead of env."""
        fn = self.fn
        return ReaderT(lambda env: fn(f(env)), self.monad)


class ReaderTFactory(msgspec.Struct, frozen=True):
    """Constructors for ReaderT over one inner monad."""

    monad: MonadDescriptor

    def of[A](self, value: A) -> ReaderT[Any, A]:
        """Ignore the environment and return monad.of(value)."""
        monad = self.monad
        return ReaderT(lambda _env: monad.of(value), monad)

    def from_[R, A](self, fn: Callable[[R], Any]) -> ReaderT[R, A]:
        """Wrap an existing env -> M[A] function."""
        return ReaderT(fn, self.monad)

    def lift[A](self, inner: Any) -> ReaderT[Any, A]:
        """Ignore the environment and return the given M[A] unchanged."""
        return ReaderT(lambda _env: inner, self.monad)

    def ask[R](self) -> ReaderT[R, R]:
        """Return the environment itself: monad.of(env)."""
        monad = self.monad
        return ReaderT(monad.of, monad)

    def asks[R, A](self, f: Callable[[R], A]) -> ReaderT[R, A]:
        """Project a value out of the environment: monad.of(f(env))."""
        monad = self.monad
        return ReaderT(lambda env: monad.of(f(env)), monad)

    @property
    def descriptor(self) -> MonadDescriptor:
        """This factory's ReaderT instances described as an inner monad."""
        return stacked_descriptor('ReaderT', self.monad, self.of)


def reader_t(monad: MonadDescriptor) -> ReaderTFactory:
    """Create a ReaderT factory over the inner monad described by `monad`."""
    log_factory_created('ReaderT', monad)
    return ReaderTFactory(monad)
