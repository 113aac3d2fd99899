"""Structural search over nested mappings and sequences."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

Predicate = Callable[[Any, Any], bool]


def find_refs(container: Any, predicate: Predicate) -> list[Any]:
    """Return every value whose ``(key, value)`` pair satisfies ``predicate``.

    Walks mappings and lists depth-first, left to right. A matched value is
    not searched further; list elements are only descended into, never
    tested themselves.
    """

    if isinstance(container, Mapping):
        found: list[Any] = []
        for key, value in container.items():
            if predicate(key, value):
                found.append(value)
            else:
                found.extend(find_refs(value, predicate))
        return found

    if isinstance(container, (list, tuple)):
        found = []
        for item in container:
            found.extend(find_refs(item, predicate))
        return found

    return []


def value_equals(target: Any) -> Predicate:
    """Predicate matching values equal to ``target``."""

    def _match(_key: Any, value: Any) -> bool:
        return isinstance(value, str) and value == target

    return _match
