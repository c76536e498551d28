"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for settings and the texts
service.
"""

from functools import lru_cache

from multilang.configuration import Settings
from multilang.texts.factory import create_cache_gateway, create_text_store
from multilang.texts.service import TextService


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The single source of truth for settings across the application. The
    @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_text_service() -> TextService:
    """
    Get application-scoped texts service singleton.

    The store and cache backends are selected by ``settings.db.connection``
    and ``settings.cache.store``.

    Returns:
        TextService: Cached service instance.
    """
    settings = get_settings()
    return TextService(
        settings,
        store=create_text_store(settings),
        cache=create_cache_gateway(settings),
    )
