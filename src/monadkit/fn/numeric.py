"""Clamping and arithmetic sections.

Every section takes the right-hand operand first: `sub(5)(10) == 5`,
`pow_(2)(5) == 25`.
"""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Any

__all__ = [
    'add',
    'bounded',
    'ceil_div',
    'div',
    'floor_div',
    'mul',
    'pow_',
    'shl',
    'shr',
    'sub',
]


def bounded(
    min: float,  # noqa: A002
    max: float,  # noqa: A002
    *,
    inclusive_min: bool = True,
    inclusive_max: bool = True,
) -> Callable[[float], float]:
    """Clamp values into [min, max].

    Example:
        ```python
        clamp = bounded(0, 100)
        clamp(150)  # 100
        clamp(-3)  # 0
        ```
    """
    below = operator.lt if inclusive_min else operator.le
    above = operator.gt if inclusive_max else operator.ge

    def clamp(value: float) -> float:
        if below(value, min):
            return min
        if above(value, max):
            return max
        return value

    return clamp


def _section(op: Callable[[Any, Any], Any]) -> Callable[[Any], Callable[[Any], Any]]:
    return lambda a: lambda b: op(b, a)


add = _section(operator.add)
sub = _section(operator.sub)
mul = _section(operator.mul)
div = _section(operator.truediv)
floor_div = _section(operator.floordiv)
pow_ = _section(operator.pow)
shr = _section(operator.rshift)
shl = _section(operator.lshift)


def ceil_div(a: int) -> Callable[[int], int]:
    """ceil_div(5)(11) == 3."""
    return lambda b: -(-b // a)
