"""Text cache settings."""

from pydantic import Field, field_validator

from multilang.configuration.base import SectionSettings

CACHE_STORES = ("default", "memory", "redis")


class CacheSettings(SectionSettings):
    """Cache configuration for locale text snapshots.

    Environment Variables:
        TEXTS_CACHE_ENABLED: Whether snapshots are cached at all (default: True)
        TEXTS_CACHE_STORE: Cache backend name: default, memory or redis (default: default)
        TEXTS_CACHE_LIFETIME: Snapshot lifetime in minutes (default: 1440)
        REDIS_HOST: Redis host used by the redis store (default: localhost)
        REDIS_PORT: Redis port used by the redis store (default: 6379)

    Example:
        ```python
        from multilang.services import get_settings

        settings = get_settings()
        if settings.cache.enabled:
            ttl = settings.cache.lifetime_seconds
        ```
    """

    enabled: bool = Field(default=True, alias="TEXTS_CACHE_ENABLED")
    store: str = Field(default="default", alias="TEXTS_CACHE_STORE")
    lifetime: int = Field(default=1440, alias="TEXTS_CACHE_LIFETIME", ge=1)
    REDIS_HOST: str = Field(default="localhost", alias="REDIS_HOST")
    REDIS_PORT: int = Field(default=6379, alias="REDIS_PORT")

    @field_validator("store")
    @classmethod
    def validate_store(cls, v: str) -> str:
        """Validate the cache store name."""
        v = v.strip().lower()
        if v not in CACHE_STORES:
            raise ValueError(f"Unsupported cache store: {v}")
        return v

    @property
    def lifetime_seconds(self) -> int:
        """Snapshot lifetime converted to seconds."""
        return self.lifetime * 60
