"""Test data factories for deterministic test data generation."""

from tests.factories.texts import (
    FakeClock,
    make_locale_table,
    make_settings,
    make_text_rows,
    make_text_snapshot,
)

__all__ = [
    "FakeClock",
    "make_locale_table",
    "make_settings",
    "make_text_rows",
    "make_text_snapshot",
]
