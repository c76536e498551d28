"""Feature-level fixtures for the texts system tests."""

from unittest.mock import MagicMock

import pytest

from multilang.texts.registry import TextRegistry
from multilang.texts.store import DurableStore


@pytest.fixture
def spy_store(memory_store):
    """The seeded in-memory store wrapped to record calls."""
    return MagicMock(spec=DurableStore, wraps=memory_store)


@pytest.fixture
def production_registry(production_settings, spy_store, memory_cache):
    """Registry in production with the in-memory cache."""
    return TextRegistry(production_settings, store=spy_store, cache=memory_cache)

