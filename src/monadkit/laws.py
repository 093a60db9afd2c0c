"""Opt-in checks for the monad, functor and monoid laws.

Nothing in monadkit enforces these laws at runtime. The checkers below let a
test suite (or a caller supplying their own MonadDescriptor) confirm them for
chosen sample values. Each returns Ok(None) when every law holds, or
Err(LawViolation) naming the first law that failed along with both sides.

Computations are compared by value after `run`, so transformers whose run()
needs an argument (ReaderT) pass e.g. `run=lambda m: m.run(env)`.

Example:
    ```python
    from monadkit import IDENTITY, maybe_t
    from monadkit.laws import check_monad_laws

    MT = maybe_t(IDENTITY)
    check_monad_laws(MT, 3, lambda x: MT.of(x + 1), lambda x: MT.of(x * 2))
    # Ok(value=None)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monadkit._logging import LAW_VIOLATED, get_logger
from monadkit.errors import LawViolation
from monadkit.monad import MonadDescriptor, Monoid, map_via_flat_map
from monadkit.types.result import Err, Ok, Result

__all__ = [
    'check_descriptor_laws',
    'check_functor_laws',
    'check_monad_laws',
    'check_monoid',
]

logger = get_logger(__name__)

type LawCheck = Result[None, LawViolation]


def _run_default(m: Any) -> Any:
    return m.run()


def _check(laws: list[tuple[str, Callable[[], Any], Callable[[], Any]]]) -> LawCheck:
    for law, left, right in laws:
        lhs, rhs = left(), right()
        if lhs != rhs:
            logger.debug(LAW_VIOLATED, law=law, left=lhs, right=rhs)
            return Err(LawViolation(law, lhs, rhs))
    return Ok(None)


def check_monad_laws(
    factory: Any,
    value: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    run: Callable[[Any], Any] = _run_default,
) -> LawCheck:
    """Check left identity, right identity and associativity for a transformer factory.

    Args:
        factory: Anything with `of`; its instances must have `flat_map`.
        value: Sample value lifted with factory.of.
        f: Continuation producing an instance from the factory.
        g: Second continuation, used for associativity.
        run: Turns an instance into a comparable value.
    """
    m = factory.of(value)
    return _check([
        ('left identity', lambda: run(factory.of(value).flat_map(f)), lambda: run(f(value))),
        ('right identity', lambda: run(m.flat_map(factory.of)), lambda: run(m)),
        (
            'associativity',
            lambda: run(m.flat_map(f).flat_map(g)),
            lambda: run(m.flat_map(lambda x: f(x).flat_map(g))),
        ),
    ])


def check_functor_laws(
    m: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    run: Callable[[Any], Any] = _run_default,
) -> LawCheck:
    """Check map identity and map composition for one instance."""
    return _check([
        ('functor identity', lambda: run(m.map(lambda x: x)), lambda: run(m)),
        (
            'functor composition',
            lambda: run(m.map(f).map(g)),
            lambda: run(m.map(lambda x: g(f(x)))),
        ),
    ])


def check_descriptor_laws(
    monad: MonadDescriptor,
    value: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    run: Callable[[Any], Any] = lambda m: m,
) -> LawCheck:
    """Check a MonadDescriptor's own of/flat_map, and that its map matches the fallback.

    f and g here return values of the inner monad itself, not transformers.
    """
    m = monad.of(value)
    laws = [
        ('left identity', lambda: run(monad.flat_map(monad.of(value), f)), lambda: run(f(value))),
        ('right identity', lambda: run(monad.flat_map(m, monad.of)), lambda: run(m)),
        (
            'associativity',
            lambda: run(monad.flat_map(monad.flat_map(m, f), g)),
            lambda: run(monad.flat_map(m, lambda x: monad.flat_map(f(x), g))),
        ),
    ]
    if monad.map is not None:
        custom_map = monad.map
        laws.append((
            'map agrees with flat_map',
            lambda: run(custom_map(m, str)),
            lambda: run(map_via_flat_map(monad, m, str)),
        ))
    return _check(laws)


def check_monoid[W](monoid: Monoid[W], a: W, b: W, c: W) -> LawCheck:
    """Check associativity and two-sided identity of a monoid on three samples."""
    concat, empty = monoid.concat, monoid.new_empty()
    return _check([
        ('monoid associativity', lambda: concat(concat(a, b), c), lambda: concat(a, concat(b, c))),
        ('monoid left identity', lambda: concat(empty, a), lambda: a),
        ('monoid right identity', lambda: concat(a, empty), lambda: a),
    ])
