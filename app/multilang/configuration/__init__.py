"""Configuration module - public API.

Centralized configuration for multilang using Pydantic BaseSettings with
domain-based organization.

Exports:
    Settings: Main settings class
    CacheSettings, DatabaseSettings, LocaleSettings: section classes

Example:
    ```python
    from multilang.services import get_settings

    settings = get_settings()
    lifetime = settings.cache.lifetime
    table = settings.db.texts_table
    ```
"""

from multilang.configuration.cache import CacheSettings
from multilang.configuration.database import DatabaseSettings
from multilang.configuration.locales import LocaleSettings
from multilang.configuration.settings import LOCAL, PRODUCTION, Settings

__all__ = [
    "Settings",
    "CacheSettings",
    "DatabaseSettings",
    "LocaleSettings",
    "PRODUCTION",
    "LOCAL",
]
