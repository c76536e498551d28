"""multilang configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from multilang.configuration.cache import CacheSettings
from multilang.configuration.database import DatabaseSettings
from multilang.configuration.locales import LocaleSettings

PRODUCTION = "production"
LOCAL = "local"


class Settings(BaseSettings):
    """multilang configuration settings - main aggregator.

    Aggregates the domain-specific settings into a single configuration object:

    - **cache**: snapshot cache (enabled, store, lifetime)
    - **db**: durable store (connection, texts_table, autosave)
    - **locales**: locale table and default locale

    Environment Variables:
        ENVIRONMENT: Runtime environment name (default: production)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from multilang.services import get_settings

        settings = get_settings()
        table = settings.db.texts_table
        if settings.is_production and settings.cache.enabled:
            ...
        ```
    """

    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    cache: CacheSettings
    db: DatabaseSettings
    locales: LocaleSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return self.ENVIRONMENT == PRODUCTION

    @property
    def is_local(self) -> bool:
        """Check if the application is running on a developer machine."""
        return self.ENVIRONMENT == LOCAL

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "cache": CacheSettings,
            "db": DatabaseSettings,
            "locales": LocaleSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
