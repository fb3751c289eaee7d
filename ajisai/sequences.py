"""Small helpers for sequences."""

from __future__ import annotations

from typing import Any, Iterable, TypeVar

T = TypeVar("T")


def contains_any(source: Iterable[T], values: Iterable[T]) -> bool:
    """Return whether any of ``values`` occurs in ``source``."""
    pool = list(source)
    return any(value in pool for value in values)


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(value == type(value)())
    except TypeError:
        return False


def remove_zero_values(source: Iterable[T]) -> list[T]:
    """Return the items of ``source`` that differ from their type's default."""
    return [value for value in source if not _is_zero(value)]