"""Tests for multilang.texts.factory module."""

from unittest.mock import patch

import pytest

from multilang.texts.backends.dynamodb_store import DynamoDBTextStore
from multilang.texts.cache import InMemoryCacheGateway
from multilang.texts.factory import create_cache_gateway, create_text_store
from multilang.texts.store import InMemoryTextStore
from tests.factories import make_settings

pytestmark = pytest.mark.unit


class TestCreateCacheGateway:
    """Tests for create_cache_gateway()."""

    def test_disabled_cache(self):
        """No gateway is created when caching is disabled."""
        assert create_cache_gateway(make_settings(cache_enabled=False)) is None

    def test_memory_cache(self):
        """The memory store creates an in-memory gateway."""
        cache = create_cache_gateway(make_settings(cache_store="memory"))
        assert isinstance(cache, InMemoryCacheGateway)

    @pytest.mark.parametrize("store", ["default", "redis"])
    def test_redis_cache(self, store):
        """The default store is Redis."""
        with patch("multilang.texts.backends.redis_cache.RedisCacheGateway") as mock_cls:
            cache = create_cache_gateway(make_settings(cache_store=store))
        assert cache is mock_cls.return_value


class TestCreateTextStore:
    """Tests for create_text_store()."""

    def test_memory_store(self):
        """The memory connection creates an empty in-memory store."""
        store = create_text_store(make_settings(connection="memory"))
        assert isinstance(store, InMemoryTextStore)
        assert store.rows == []

    @pytest.mark.parametrize("connection", ["default", "dynamodb"])
    def test_dynamodb_store(self, connection):
        """The default connection is DynamoDB on the configured table."""
        store = create_text_store(
            make_settings(connection=connection, texts_table="site_texts")
        )
        assert isinstance(store, DynamoDBTextStore)
        assert store.table_name == "site_texts"
