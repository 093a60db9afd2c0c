"""ResultT: fallible computations layered over an arbitrary inner monad.

Also known as ExceptT. A ResultT wraps M[Result[A, E]]. The error is a plain
value carried in Err, never raised. flat_map stops at the first Err and hands
that same error object to the end of the chain; only map_err changes it.

Example:
    ```python
    from monadkit import IDENTITY, Err, result_t

    RT = result_t(IDENTITY)

    def positive(x):
        return RT.of(x) if x > 0 else RT.from_(Err('neg'))

    RT.of(10).flat_map(positive).run()  # Ok(value=10)
    RT.of(-1).flat_map(positive).run()  # Err(error='neg')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, assert_never

import msgspec

from monadkit.monad import MonadDescriptor, fmap
from monadkit.transformer._base import log_factory_created, stacked_descriptor
from monadkit.types.result import Err, Ok, Result

__all__ = ['ResultT', 'ResultTFactory', 'result_t']


class ResultT[A, E](msgspec.Struct, frozen=True):
    """An M[Result[A, E]] with map/flat_map acting on the A inside.

    Attributes:
        inner: The wrapped M[Result[A, E]].
        monad: Descriptor of M.
    """

    inner: Any
    monad: MonadDescriptor

    def run(self) -> Any:
        """Return the wrapped M[Result[A, E]]."""
        return self.inner

    def map[B](self, f: Callable[[A], B]) -> ResultT[B, E]:
        """Apply f to the Ok value; an Err passes through untouched."""

        def step(result: Result[A, E]) -> Result[B, E]:
            match result:
                case Ok(value):
                    return Ok(f(value))
                case Err():
                    return result
                case _:
                    assert_never(result)

        return ResultT(fmap(self.monad, self.inner, step), self.monad)

    def map_err[F](self, f: Callable[[E], F]) -> ResultT[A, F]:
        """Apply f to the error; an Ok passes through untouched."""

        def step(result: Result[A, E]) -> Result[A, F]:
            match result:
                case Ok():
                    return result
                case Err(error):
                    return Err(f(error))
                case _:
                    assert_never(result)

        return ResultT(fmap(self.monad, self.inner, step), self.monad)

    def flat_map[B](self, f: Callable[[A], ResultT[B, E]]) -> ResultT[B, E]:
        """Sequence a ResultT-producing continuation.

        On Ok(a) the result is f(a).run(). On Err the original Err is
        re-wrapped with monad.of and f is never called.
        """
        monad = self.monad

        def step(result: Result[A, E]) -> Any:
            match result:
                case Ok(value):
                    return f(value).run()
                case Err():
                    return monad.of(result)
                case _:
                    assert_never(result)

        return ResultT(monad.flat_map(self.inner, step), monad)

    def or_else[F](self, f: Callable[[E], ResultT[A, F]]) -> ResultT[A, F]:
        """Recover from an error with the computation f(error) returns."""
        monad = self.monad

        def step(result: Result[A, E]) -> Any:
            match result:
                case Ok():
                    return monad.of(result)
                case Err(error):
                    return f(error).run()
                case _:
                    assert_never(result)

        return ResultT(monad.flat_map(self.inner, step), monad)

    def unwrap_or(self, default: A) -> Any:
        """Collapse the result layer, returning M[A] with default for Err."""
        return fmap(self.monad, self.inner, lambda result: result.unwrap_or(default))


class ResultTFactory(msgspec.Struct, frozen=True):
    """Constructors for ResultT over one inner monad."""

    monad: MonadDescriptor

    def of[A](self, value: A) -> ResultT[A, Any]:
        """Wrap a plain value: monad.of(Ok(value))."""
        return ResultT(self.monad.of(Ok(value)), self.monad)

    def from_[A, E](self, inner: Any) -> ResultT[A, E]:
        """Wrap an existing M[Result[A, E]] as-is."""
        return ResultT(inner, self.monad)

    def lift[A](self, inner: Any) -> ResultT[A, Any]:
        """Turn M[A] into M[Result[A, E]] by marking every value Ok."""
        return ResultT(fmap(self.monad, inner, Ok), self.monad)

    def err[E](self, error: E) -> ResultT[Any, E]:
        """A failed computation: monad.of(Err(error))."""
        return ResultT(self.monad.of(Err(error)), self.monad)

    @property
    def descriptor(self) -> MonadDescriptor:
        """This factory's ResultT instances described as an inner monad."""
        return stacked_descriptor('ResultT', self.monad, self.of)


def result_t(monad: MonadDescriptor) -> ResultTFactory:
    """Create a ResultT factory over the inner monad described by `monad`."""
    log_factory_created('ResultT', monad)
    return ResultTFactory(monad)
