"""Registry client and cache store services for Iconify Client."""

from .factory import create_cache_store, create_client
from .iconify_client import IconifyClient
from .memory_cache import InMemoryCacheStore
from .scoped_http import ScopedHttpClient
from .sqlite_cache import SqliteCacheStore

__all__ = [
    "IconifyClient",
    "ScopedHttpClient",
    "InMemoryCacheStore",
    "SqliteCacheStore",
    "create_cache_store",
    "create_client",
]
