"""Function utilities: combinators, predicates, numeric sections, accessors.

Example:
    ```python
    from monadkit.fn import add, gt, pipe

    pipe(add(1), gt(5))(5)  # True
    ```
"""

from monadkit.fn.access import flatten_by, prop
from monadkit.fn.combinators import (
    all_of,
    also,
    any_of,
    apply,
    compose,
    constant,
    curry,
    flip,
    flip_hof,
    get_or_exec,
    identity,
    is_not_none,
    negate,
    noop,
    pipe,
    run,
    uncurry,
)
from monadkit.fn.numeric import add, bounded, ceil_div, div, floor_div, mul, pow_, shl, shr, sub
from monadkit.fn.predicates import (
    all_falsy,
    all_truthy,
    any_falsy,
    any_truthy,
    eq,
    falsy,
    ge,
    gt,
    instance_of,
    le,
    lt,
    ne,
    select,
    truthy,
)

__all__ = [
    'add',
    'all_falsy',
    'all_of',
    'all_truthy',
    'also',
    'any_falsy',
    'any_of',
    'any_truthy',
    'apply',
    'bounded',
    'ceil_div',
    'compose',
    'constant',
    'curry',
    'div',
    'eq',
    'falsy',
    'flatten_by',
    'flip',
    'flip_hof',
    'floor_div',
    'ge',
    'get_or_exec',
    'gt',
    'identity',
    'instance_of',
    'is_not_none',
    'le',
    'lt',
    'mul',
    'ne',
    'negate',
    'noop',
    'pipe',
    'pow_',
    'prop',
    'run',
    'select',
    'shl',
    'shr',
    'sub',
    'truthy',
    'uncurry',
]
