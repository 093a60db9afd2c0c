"""Reader type: a computation that reads from a shared environment."""

from __future__ import annotations

from collections.abc import Callable

import msgspec

__all__ = ['Reader', 'ask', 'asks']


class Reader[R, A](msgspec.Struct, frozen=True):
    """A function from an environment R to a value A.

    Nothing is evaluated until run() is given an environment. Every step of a
    flat_map chain sees the same environment; use local() to run a
    sub-computation against a modified one.

    Examples:
        >>> greet = Reader.asks(lambda env: env['name']).map(str.upper)
        >>> greet.run({'name': 'ada'})
        'ADA'
    """

    fn: Callable[[R], A]

    @staticmethod
    def of[V](value: V) -> Reader[object, V]:
        """Build a Reader that ignores its environment and returns value."""
        return Reader(lambda _env: value)

    @staticmethod
    def ask[E]() -> Reader[E, E]:
        """Build a Reader that returns the environment itself."""
        return Reader(lambda env: env)

    @staticmethod
    def asks[E, V](f: Callable[[E], V]) -> Reader[E, V]:
        """Build a Reader that projects a value out of the environment."""
        return Reader(f)

    def run(self, env: R) -> A:
        """Evaluate the computation against env."""
        return self.fn(env)

    def map[B](self, f: Callable[[A], B]) -> Reader[R, B]:
        """Transform the result once the environment is supplied."""
        return Reader(lambda env: f(self.fn(env)))

    def flat_map[B](self, f: Callable[[A], Reader[R, B]]) -> Reader[R, B]:
        """Sequence a Reader-producing continuation under the same environment."""
        return Reader(lambda env: f(self.fn(env)).run(env))

    and_then = flat_map

    def local(self, f: Callable[[R], R]) -> Reader[R, A]:
        """Run this computation against f(env) instead of env."""
        return Reader(lambda env: self.fn(f(env)))

    def __call__(self, env: R) -> A:
        return self.fn(env)


def ask[E]() -> Reader[E, E]:
    """Module-level alias for Reader.ask()."""
    return Reader.ask()


def asks[E, V](f: Callable[[E], V]) -> Reader[E, V]:
    """Module-level alias for Reader.asks()."""
    return Reader.asks(f)
