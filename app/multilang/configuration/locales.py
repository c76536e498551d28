"""Locale table settings."""

from typing import Any, Dict

from pydantic import Field, field_validator, model_validator

from multilang.configuration.base import SectionSettings


class LocaleSettings(SectionSettings):
    """Configured locales and the fallback locale.

    Environment Variables:
        LOCALES: JSON object of locale code -> attributes, e.g.
            '{"en": {"name": "English"}, "ka": {"name": "Georgian", "locale": "ka"}}'
        DEFAULT_LOCALE: Fallback locale code (default: en)

    The optional ``locale`` attribute of an entry is the canonical locale
    returned by detection instead of the code itself.
    """

    locales: Dict[str, Dict[str, Any]] = Field(
        default_factory=lambda: {"en": {"name": "English"}},
        alias="LOCALES",
    )
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE", min_length=1)

    @field_validator("locales", mode="before")
    @classmethod
    def validate_locales(cls, v: Any) -> Any:
        """Accept a missing value or a list of codes."""
        if v is None:
            return {}
        if isinstance(v, (list, tuple)):
            return {code: {} for code in v}
        return v

    @model_validator(mode="after")
    def validate_default_locale(self) -> "LocaleSettings":
        """The default locale must be one of the configured locales."""
        if self.locales and self.default_locale not in self.locales:
            raise ValueError(
                f"DEFAULT_LOCALE '{self.default_locale}' is not in LOCALES"
            )
        return self
