"""Fixtures for server module unit tests."""

import pytest
from fastapi.testclient import TestClient

from multilang.services.providers import get_text_service
from multilang.texts.service import TextService
from server.server import create_app


@pytest.fixture
def local_service(local_settings, memory_store):
    """Texts service for a local environment, backed by memory."""
    return TextService(local_settings, store=memory_store)


@pytest.fixture
def production_service(production_settings, memory_store, memory_cache):
    """Texts service for production with the in-memory cache."""
    return TextService(production_settings, store=memory_store, cache=memory_cache)


def _client(service):
    app = create_app(text_service=service)
    app.dependency_overrides[get_text_service] = lambda: service
    return TestClient(app)


@pytest.fixture
def local_client(local_service):
    """Test client whose autosave is allowed."""
    return _client(local_service)


@pytest.fixture
def production_client(production_service):
    """Test client running as production."""
    return _client(production_service)
