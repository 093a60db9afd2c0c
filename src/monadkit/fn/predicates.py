"""Truthiness checks and comparison sections.

Comparison sections take the right-hand operand first, so they read naturally
as filters: `lt(0)(x)` is `x < 0`.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

__all__ = [
    'all_falsy',
    'all_truthy',
    'any_falsy',
    'any_truthy',
    'eq',
    'falsy',
    'ge',
    'gt',
    'instance_of',
    'le',
    'lt',
    'ne',
    'select',
    'truthy',
]


def select[A, B](
    pred: bool | Callable[[], bool],
    t: Callable[[], A] | None = None,
    f: Callable[[], B] | None = None,
) -> A | B | None:
    """Call t or f depending on pred. A missing branch yields None.

    Example:
        ```python
        select(lambda: 1 > 0, t=lambda: 'yes', f=lambda: 'no')  # 'yes'
        select(False, t=lambda: 'yes')  # None
        ```
    """
    cond = pred() if callable(pred) else pred
    branch = t if cond else f
    return branch() if branch is not None else None


def falsy(value: object) -> bool:
    return not value


def truthy(value: object) -> bool:
    return bool(value)


def all_falsy(*values: object) -> bool:
    return not any(values)


def any_falsy(*values: object) -> bool:
    return not all(values)


def all_truthy(*values: object) -> bool:
    return all(values)


def any_truthy(*values: object) -> bool:
    return any(values)


def eq(a: Any) -> Callable[[Any], bool]:
    return lambda b: b == a


def ne(a: Any) -> Callable[[Any], bool]:
    return lambda b: b != a


def lt(a: Any) -> Callable[[Any], bool]:
    return lambda b: b < a


def le(a: Any) -> Callable[[Any], bool]:
    return lambda b: b <= a


def gt(a: Any) -> Callable[[Any], bool]:
    return lambda b: b > a


def ge(a: Any) -> Callable[[Any], bool]:
    return lambda b: b >= a


def instance_of(cls: type | tuple[type, ...]) -> Callable[[object], bool]:
    return lambda value: isinstance(value, cls)
