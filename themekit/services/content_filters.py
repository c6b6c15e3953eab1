from __future__ import annotations

import logging
from typing import Any, Callable

_LOG = logging.getLogger("themekit.content_filters")

DEFAULT_PRIORITY = 10

FilterCallback = Callable[[Any], Any]


class FilterRegistry:
    """Named filter chains run by the content rendering pipeline.

    Callbacks run by ascending priority, then in subscription order. A callback may
    unsubscribe later callbacks of the chain that is currently running; they are
    skipped for that run.
    """

    def __init__(self):
        self._filters: dict[str, dict[int, dict[str, FilterCallback]]] = {}

    def subscribe(self, event: str, callback_id: str, callback: FilterCallback, priority: int = DEFAULT_PRIORITY) -> None:
        self._filters.setdefault(event, {}).setdefault(int(priority), {})[callback_id] = callback

    def unsubscribe(self, event: str, callback_id: str, priority: int = DEFAULT_PRIORITY) -> bool:
        bucket = self._filters.get(event, {}).get(int(priority))
        if not bucket or callback_id not in bucket:
            return False
        del bucket[callback_id]
        _LOG.debug("filter removed event=%s callback=%s priority=%s", event, callback_id, priority)
        return True

    def apply(self, event: str, value: Any) -> Any:
        chain = self._filters.get(event, {})
        for priority in sorted(chain):
            for callback_id in list(chain.get(priority, {})):
                callback = chain.get(priority, {}).get(callback_id)
                if callback is None:
                    continue
                value = callback(value)
        return value


# Registry shared by the host rendering pipeline.
content_filters = FilterRegistry()
