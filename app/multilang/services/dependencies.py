"""
Type aliases for FastAPI dependency injection.

Provides annotated type hints for common dependencies.
"""

from typing import Annotated

from fastapi import Depends

from multilang.configuration import Settings
from multilang.services.providers import get_settings, get_text_service
from multilang.texts.service import TextService

# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]

# Texts service dependency
TextServiceDep = Annotated[TextService, Depends(get_text_service)]

__all__ = [
    "SettingsDep",
    "TextServiceDep",
]
