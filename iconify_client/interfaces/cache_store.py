"""Protocol for get-or-compute cache backends."""

from collections.abc import Callable
from typing import Any, Protocol


class CacheStore(Protocol):
    """Interface for a cache backend holding computed values by key.

    Any backing (process memory, SQLite file, a distributed cache, ...)
    implements this protocol. Expiration and persistence are the store's
    own policy.
    """

    def get(self, key: str, compute: Callable[[], Any]) -> Any:
        """Return the cached value for ``key``, computing and storing it on a miss.

        Args:
            key: Cache key.
            compute: Zero-argument callable producing the value. If it
                raises, nothing is stored and the exception propagates.

        Returns:
            The cached or freshly computed value.
        """
        ...

    def delete(self, key: str) -> bool:
        """Remove ``key`` from the cache.

        Returns:
            True if an entry was removed.
        """
        ...
