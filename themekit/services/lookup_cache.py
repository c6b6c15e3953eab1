from __future__ import annotations

from typing import Any, Callable, Hashable, TypeVar

T = TypeVar("T")

_MISSING = object()


class LookupCache:
    """Per-owner memo of computed values, grouped by namespace.

    Entries live as long as the owning object and are never expired, so the cache
    belongs on request-scoped objects only. Not thread-safe.
    """

    def __init__(self):
        self._data: dict[str, dict[Hashable, Any]] = {}

    def get_or_compute(self, namespace: str, key: Hashable, compute_fn: Callable[[], T]) -> T:
        bucket = self._data.setdefault(namespace, {})
        value = bucket.get(key, _MISSING)
        if value is _MISSING:
            value = compute_fn()
            bucket[key] = value
        return value
