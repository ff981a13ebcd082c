"""Interface protocols for Iconify Client."""

from .cache_store import CacheStore
from .http_transport import HttpTransport

__all__ = ["CacheStore", "HttpTransport"]
