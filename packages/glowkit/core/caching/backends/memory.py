"""In-process query cache backed by a dict."""

from __future__ import annotations

import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryQueryCache:
    """
    Unbounded dict cache guarded by a lock.

    Entries live for the process lifetime or until ``invalidate``.
    """

    def __init__(self) -> None:
        self._entries: dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Any | None:
        with self._lock:
            value = self._entries.get(key)
        logger.debug(f"Query cache {'hit' if value is not None else 'miss'}: {key}")
        return value

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            self._entries[key] = value
        logger.debug(f"Query cache stored: {key}")

    def invalidate(self) -> None:
        with self._lock:
            count = len(self._entries)
            self._entries = {}
        logger.debug(f"Query cache invalidated ({count} entries dropped)")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries
