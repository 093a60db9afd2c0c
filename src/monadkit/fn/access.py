"""Accessors for plain nested data."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

__all__ = ['flatten_by', 'prop']


def flatten_by(extractor: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Apply extractor to every item of a list, or every value of a mapping.

    Example:
        ```python
        names = flatten_by(lambda u: u['name'])
        names([{'name': 'ada'}, {'name': 'bob'}])  # ['ada', 'bob']
        names({'a': {'name': 'ada'}})  # {'a': 'ada'}
        ```
    """

    def flatten(items: Any) -> Any:
        if isinstance(items, Mapping):
            return {key: extractor(value) for key, value in items.items()}
        return [extractor(item) for item in items]

    return flatten


def _step(obj: Any, key: str) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(key)
    if isinstance(obj, Sequence) and not isinstance(obj, str) and key.lstrip('-').isdigit():
        index = int(key)
        return obj[index] if -len(obj) <= index < len(obj) else None
    return getattr(obj, key, None)


def prop(path: str) -> Callable[[Any], Any]:
    """Read a dotted path through mappings, sequences and attributes.

    Any missing step yields None rather than raising.

    Example:
        ```python
        prop('user.address.city')({'user': {'address': {'city': 'Oslo'}}})  # 'Oslo'
        prop('user.age')({'user': {}})  # None
        ```
    """
    keys = path.split('.')

    def get(obj: Any) -> Any:
        for key in keys:
            obj = _step(obj, key)
        return obj

    return get
