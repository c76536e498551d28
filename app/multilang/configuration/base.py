"""Shared base class for the settings sections."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class SectionSettings(BaseSettings):
    """Base class for one section of the texts configuration.

    Sections read their own environment variables (and ``.env``) and accept
    either the variable name or the field name as a keyword argument.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )
