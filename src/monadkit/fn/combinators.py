"""Small higher-order helpers for building and rearranging functions."""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any

__all__ = [
    'all_of',
    'also',
    'any_of',
    'apply',
    'compose',
    'constant',
    'curry',
    'flip',
    'flip_hof',
    'get_or_exec',
    'identity',
    'is_not_none',
    'negate',
    'noop',
    'pipe',
    'run',
    'uncurry',
]


def constant[T](value: T) -> Callable[..., T]:
    """Return a function that ignores its arguments and returns value."""

    def always(*_args: Any, **_kwargs: Any) -> T:
        return value

    return always


def identity[T](value: T) -> T:
    return value


def pipe(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose left to right: pipe(f, g)(x) == g(f(x)).

    The first function may take any arguments; the rest take one.
    """
    if not fns:
        return identity
    first, *rest = fns

    def piped(*args: Any, **kwargs: Any) -> Any:
        return functools.reduce(lambda acc, fn: fn(acc), rest, first(*args, **kwargs))

    return piped


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose right to left: compose(g, f)(x) == g(f(x))."""
    return pipe(*reversed(fns))


def apply[R](fn: Callable[..., R]) -> Callable[..., R]:
    """Wrap fn so it can be passed where a plain callable is expected."""

    def applied(*args: Any, **kwargs: Any) -> R:
        return fn(*args, **kwargs)

    return applied


run = apply


def also[T](fn: Callable[[T], Any]) -> Callable[[T], T]:
    """Call fn for its side effect and hand back the original value.

    Example:
        ```python
        seen = []
        also(seen.append)(5)  # 5, and seen == [5]
        ```
    """

    def tap(value: T) -> T:
        fn(value)
        return value

    return tap


def noop(*_args: Any, **_kwargs: Any) -> None:
    return None


def flip[R](fn: Callable[..., R]) -> Callable[..., R]:
    """Call fn with its positional arguments reversed."""

    def flipped(*args: Any) -> R:
        return fn(*reversed(args))

    return flipped


def flip_hof[A, B, R](fn: Callable[[A], Callable[[B], R]]) -> Callable[[B], Callable[[A], R]]:
    """Swap the argument order of a curried binary function."""
    return lambda b: lambda a: fn(a)(b)


def uncurry[A, B, R](fn: Callable[[A], Callable[[B], R]]) -> Callable[[A, B], R]:
    return lambda a, b: fn(a)(b)


def curry[A, B, R](fn: Callable[[A, B], R]) -> Callable[[A], Callable[[B], R]]:
    return lambda a: lambda b: fn(a, b)


def get_or_exec(value: Any) -> Any:
    """Call value if it is callable, otherwise return it as is."""
    if callable(value):
        return value()
    return value


def is_not_none(value: object) -> bool:
    return value is not None


def negate(pred: Callable[..., bool]) -> Callable[..., bool]:
    def negated(*args: Any, **kwargs: Any) -> bool:
        return not pred(*args, **kwargs)

    return negated


def all_of(*preds: Callable[..., bool]) -> Callable[..., bool]:
    """True when every predicate holds for the arguments (vacuously for none)."""

    def check(*args: Any, **kwargs: Any) -> bool:
        return all(pred(*args, **kwargs) for pred in preds)

    return check


def any_of(*preds: Callable[..., bool]) -> Callable[..., bool]:
    """True when at least one predicate holds for the arguments."""

    def check(*args: Any, **kwargs: Any) -> bool:
        return any(pred(*args, **kwargs) for pred in preds)

    return check
