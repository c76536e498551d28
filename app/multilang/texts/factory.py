"""Factory functions for creating texts components from settings.

Usage:
    from multilang.services import get_settings
    from multilang.texts.factory import create_cache_gateway, create_text_store

    settings = get_settings()
    registry = TextRegistry(
        settings,
        store=create_text_store(settings),
        cache=create_cache_gateway(settings),
    )
"""

from typing import TYPE_CHECKING, Optional

from multilang.logging import get_module_logger
from multilang.texts.cache import CacheGateway, InMemoryCacheGateway
from multilang.texts.store import DurableStore, InMemoryTextStore

if TYPE_CHECKING:
    from multilang.configuration import Settings

logger = get_module_logger()

DEFAULT_CACHE_STORE = "redis"
DEFAULT_DB_CONNECTION = "dynamodb"


def create_cache_gateway(settings: "Settings") -> Optional[CacheGateway]:
    """Create the snapshot cache configured by ``settings.cache``.

    Returns:
        The cache gateway, or None when caching is disabled.
    """
    if not settings.cache.enabled:
        logger.info("texts_cache_disabled")
        return None

    store = settings.cache.store
    if store == "default":
        store = DEFAULT_CACHE_STORE

    if store == "memory":
        cache: CacheGateway = InMemoryCacheGateway()
    else:
        # Backend clients read settings through multilang.services.providers
        from multilang.texts.backends.redis_cache import RedisCacheGateway

        cache = RedisCacheGateway()

    logger.info("texts_cache_created", store=store)
    return cache


def create_text_store(settings: "Settings") -> DurableStore:
    """Create the durable store configured by ``settings.db``."""
    connection = settings.db.connection
    if connection == "default":
        connection = DEFAULT_DB_CONNECTION

    if connection == "memory":
        store: DurableStore = InMemoryTextStore()
    else:
        from multilang.texts.backends.dynamodb_store import DynamoDBTextStore

        store = DynamoDBTextStore(table_name=settings.db.texts_table)

    logger.info("text_store_created", connection=connection)
    return store
