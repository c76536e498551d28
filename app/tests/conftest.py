"""Shared fixtures for the multilang test suite."""

import pytest

from multilang.services.providers import get_settings, get_text_service
from multilang.texts.cache import InMemoryCacheGateway
from multilang.texts.store import InMemoryTextStore
from tests.factories import (
    FakeClock,
    make_locale_table,
    make_settings,
    make_text_rows,
)


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset application-scoped singletons around every test."""
    get_settings.cache_clear()
    get_text_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_text_service.cache_clear()


@pytest.fixture
def production_settings():
    """Production settings with the in-memory cache enabled."""
    return make_settings(environment="production")


@pytest.fixture
def local_settings():
    """Local development settings with autosave enabled."""
    return make_settings(environment="local")


@pytest.fixture
def locale_table():
    """English (default) and Georgian."""
    return make_locale_table()


@pytest.fixture
def clock():
    """Manually advanced clock."""
    return FakeClock()


@pytest.fixture
def memory_cache(clock):
    """In-memory cache driven by the fake clock."""
    return InMemoryCacheGateway(clock=clock)


@pytest.fixture
def memory_store():
    """In-memory store seeded with English and Georgian texts."""
    rows = make_text_rows("en", {"welcome": "Welcome", "about.title": "About us"})
    rows += make_text_rows("ka", {"welcome": "მოგესალმებით"})
    return InMemoryTextStore(rows)
