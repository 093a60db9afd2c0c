"""Shared plumbing for transformer factories."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from monadkit._logging import FACTORY_CREATED, get_logger
from monadkit.monad import MonadDescriptor, bind_method, map_method

logger = get_logger(__name__)


def stacked_descriptor(
    kind: str, inner: MonadDescriptor, of: Callable[[Any], Any]
) -> MonadDescriptor:
    """Describe a transformer's own instances as an inner monad.

    This is what lets a transformer sit under another one: the outer factory
    only sees `of`, `flat_map` and `map`, and the transformer instances
    already provide the latter two as methods.
    """
    return MonadDescriptor(of=of, flat_map=bind_method, map=map_method, name=f'{kind}[{inner.name}]')


def log_factory_created(kind: str, monad: MonadDescriptor, **extra: Any) -> None:
    logger.debug(FACTORY_CREATED, kind=kind, monad=monad.name, **extra)
