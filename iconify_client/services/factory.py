"""Factory for creating the client and its cache store from configuration."""

import logging

from iconify_client.config import IconifyConfig
from iconify_client.interfaces import CacheStore, HttpTransport
from iconify_client.services.iconify_client import IconifyClient
from iconify_client.services.memory_cache import InMemoryCacheStore
from iconify_client.services.sqlite_cache import SqliteCacheStore

logger = logging.getLogger(__name__)


def create_cache_store(config: IconifyConfig) -> CacheStore:
    """Create the cache store selected by the configuration.

    Args:
        config: Client configuration

    Returns:
        SqliteCacheStore when disk caching is enabled, otherwise InMemoryCacheStore
    """
    if config.use_disk_cache:
        logger.debug(f"Using disk cache at {config.cache_db_path}")
        return SqliteCacheStore(config.cache_db_path, ttl=config.cache_ttl)
    return InMemoryCacheStore(ttl=config.cache_ttl)


def create_client(
    config: IconifyConfig,
    cache: CacheStore | None = None,
    http: HttpTransport | None = None,
) -> IconifyClient:
    """Create an IconifyClient configured from ``config``.

    Args:
        config: Client configuration
        cache: Cache store to use instead of the configured one
        http: Pre-configured HTTP transport

    Raises:
        ConfigurationError: If the client cannot be set up
    """
    return IconifyClient(
        cache if cache is not None else create_cache_store(config),
        endpoint=config.endpoint,
        http=http,
        timeout=config.timeout,
        cache_key=config.cache_key,
        user_agent=config.user_agent,
    )
