"""WriterT: log accumulation over an arbitrary inner monad.

A WriterT wraps M[tuple[A, W]] where W is combined through a Monoid. map
touches only the value. flat_map joins logs as monoid.concat(earlier, later),
so the final log is the left-to-right fold of every step's log however the
chain is grouped.

Example:
    ```python
    from monadkit import IDENTITY, STRING_MONOID, writer_t

    WT = writer_t(IDENTITY, STRING_MONOID)
    WT.from_((5, 'a;')).flat_map(lambda x: WT.from_((x * 2, ' b;'))).run()
    # (10, 'a; b;')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import msgspec

from monadkit.monad import MonadDescriptor, Monoid, fmap
from monadkit.transformer._base import log_factory_created, stacked_descriptor

__all__ = ['WriterT', 'WriterTFactory', 'writer_t']


class WriterT[A, W](msgspec.Struct, frozen=True):
    """An M[tuple[A, W]] with map/flat_map acting on the A inside.

    Attributes:
        inner: The wrapped M[(value, log)].
        monad: Descriptor of M.
        monoid: How logs combine.
    """

    inner: Any
    monad: MonadDescriptor
    monoid: Monoid[W]

    def run(self) -> Any:
        """Return the wrapped M[(value, log)]."""
        return self.inner

    def map[B](self, f: Callable[[A], B]) -> WriterT[B, W]:
        """Apply f to the value; the log is left as is."""

        def step(pair: tuple[A, W]) -> tuple[B, W]:
            value, log = pair
            return f(value), log

        return WriterT(fmap(self.monad, self.inner, step), self.monad, self.monoid)

    def flat_map[B](self, f: Callable[[A], WriterT[B, W]]) -> WriterT[B, W]:
        """Sequence a WriterT-producing continuation, appending its log."""
        monad, monoid = self.monad, self.monoid

        def step(pair: tuple[A, W]) -> Any:
            value, log = pair

            def combine(next_pair: tuple[B, W]) -> tuple[B, W]:
                next_value, next_log = next_pair
                return next_value, monoid.concat(log, next_log)

            return fmap(monad, f(value).run(), combine)

        return WriterT(monad.flat_map(self.inner, step), monad, monoid)

    def listen(self) -> WriterT[tuple[A, W], W]:
        """Expose the log so far alongside the value."""

        def step(pair: tuple[A, W]) -> tuple[tuple[A, W], W]:
            _, log = pair
            return pair, log

        return WriterT(fmap(self.monad, self.inner, step), self.monad, self.monoid)

    def censor(self, f: Callable[[W], W]) -> WriterT[A, W]:
        """Rewrite the log accumulated so far."""

        def step(pair: tuple[A, W]) -> tuple[A, W]:
            value, log = pair
            return value, f(log)

        return WriterT(fmap(self.monad, self.inner, step), self.monad, self.monoid)


class WriterTFactory[W](msgspec.Struct, frozen=True):
    """Constructors for WriterT over one inner monad and one log monoid."""

    monad: MonadDescriptor
    monoid: Monoid[W]

    def of[A](self, value: A) -> WriterT[A, W]:
        """Wrap a plain value with an empty log."""
        return WriterT(self.monad.of((value, self.monoid.new_empty())), self.monad, self.monoid)

    def from_[A](self, inner: Any) -> WriterT[A, W]:
        """Wrap an existing M[(value, log)] as-is."""
        return WriterT(inner, self.monad, self.monoid)

    def lift[A](self, inner: Any) -> WriterT[A, W]:
        """Pair every value of M[A] with an empty log."""
        return WriterT(fmap(self.monad, inner, lambda a: (a, self.monoid.new_empty())), self.monad, self.monoid)

    def tell(self, log: W) -> WriterT[None, W]:
        """Record log without producing a value."""
        return WriterT(self.monad.of((None, log)), self.monad, self.monoid)

    @property
    def descriptor(self) -> MonadDescriptor:
        """This factory's WriterT instances described as an inner monad."""
        return stacked_descriptor('WriterT', self.monad, self.of)


def writer_t[W](monad: MonadDescriptor, monoid: Monoid[W]) -> WriterTFactory[W]:
    """Create a WriterT factory over `monad`, combining logs with `monoid`."""
    log_factory_created('WriterT', monad, monoid=monoid.name)
    return WriterTFactory(monad, monoid)
