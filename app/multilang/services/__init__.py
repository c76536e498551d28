"""Service providers and dependency injection aliases."""

from multilang.services.dependencies import SettingsDep, TextServiceDep
from multilang.services.providers import get_settings, get_text_service

__all__ = [
    "get_settings",
    "get_text_service",
    "SettingsDep",
    "TextServiceDep",
]
