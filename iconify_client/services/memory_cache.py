"""Process-local cache store."""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class InMemoryCacheStore:
    """Get-or-compute cache held in process memory.

    Implements CacheStore protocol. Computation runs under the store's lock,
    so concurrent misses on the same store compute once.
    """

    def __init__(self, ttl: float | None = None):
        """Initialize the store.

        Args:
            ttl: Seconds an entry stays valid, or None for no expiry.
        """
        self._ttl = ttl
        self._entries: dict[str, tuple[float | None, Any]] = {}
        self._lock = threading.Lock()

    def get(self, key: str, compute: Callable[[], Any]) -> Any:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                expires_at, value = entry
                if expires_at is None or time.monotonic() < expires_at:
                    logger.debug(f"Cache hit for {key}")
                    return value
                del self._entries[key]

            logger.debug(f"Cache miss for {key}")
            value = compute()
            expires_at = time.monotonic() + self._ttl if self._ttl is not None else None
            self._entries[key] = (expires_at, value)
            return value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
