"""Tests for integrations.redis_client module."""

import json
from unittest.mock import MagicMock, patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError

from integrations import redis_client
from multilang.operations.result import OperationStatus

pytestmark = pytest.mark.unit


@pytest.fixture
def mock_redis():
    """Patch the pooled client with a mock."""
    with patch("integrations.redis_client.get_redis_client") as mock_get_client:
        client = MagicMock()
        mock_get_client.return_value = client
        yield client


class TestSetValue:
    """Tests for set_value()."""

    def test_set_with_ttl_serializes_json(self, mock_redis):
        """Dicts are stored as JSON with SETEX."""
        result = redis_client.set_value("texts_en", {"locale": "en"}, ttl_seconds=60)

        assert result.is_success
        mock_redis.setex.assert_called_once_with(
            "texts_en", 60, json.dumps({"locale": "en"})
        )

    def test_set_without_ttl(self, mock_redis):
        """Without a TTL a plain SET is used."""
        redis_client.set_value("name", "value")
        mock_redis.set.assert_called_once_with("name", "value")

    def test_connection_error_is_transient(self, mock_redis):
        """Connection failures return a transient error."""
        mock_redis.setex.side_effect = RedisConnectionError("refused")

        result = redis_client.set_value("texts_en", {}, ttl_seconds=60)

        assert result.status == OperationStatus.TRANSIENT_ERROR
        assert result.error_code == "CONNECTION_ERROR"


class TestGetValue:
    """Tests for get_value()."""

    def test_get_deserializes_json(self, mock_redis):
        """JSON values are decoded."""
        mock_redis.get.return_value = '{"locale": "en", "texts": {}}'

        result = redis_client.get_value("texts_en")

        assert result.data == {"locale": "en", "texts": {}}

    def test_get_plain_string(self, mock_redis):
        """Non-JSON values are returned unchanged."""
        mock_redis.get.return_value = "plain"
        assert redis_client.get_value("name").data == "plain"

    def test_get_missing_key(self, mock_redis):
        """A missing key succeeds with no data."""
        mock_redis.get.return_value = None

        result = redis_client.get_value("texts_en")

        assert result.is_success
        assert result.data is None

    def test_command_error_is_permanent(self, mock_redis):
        """Other Redis errors are permanent."""
        mock_redis.get.side_effect = ResponseError("WRONGTYPE")

        result = redis_client.get_value("texts_en")

        assert result.status == OperationStatus.PERMANENT_ERROR
        assert result.error_code == "REDIS_ERROR"


class TestExists:
    """Tests for exists()."""

    def test_exists(self, mock_redis):
        """exists() reports whether the key is present."""
        mock_redis.exists.return_value = 1
        assert redis_client.exists("texts_en").data is True

        mock_redis.exists.return_value = 0
        assert redis_client.exists("texts_en").data is False


class TestGetRedisClient:
    """Tests for get_redis_client()."""

    def setup_method(self):
        redis_client.reset_redis_client()

    def teardown_method(self):
        redis_client.reset_redis_client()

    @patch("integrations.redis_client.get_settings")
    @patch("integrations.redis_client.Redis")
    @patch("integrations.redis_client.ConnectionPool")
    def test_client_is_pooled_and_reused(self, mock_pool, mock_redis_cls, mock_get_settings):
        """The client is created once on the configured host."""
        mock_get_settings.return_value.cache.REDIS_HOST = "cache.local"
        mock_get_settings.return_value.cache.REDIS_PORT = 6380

        first = redis_client.get_redis_client()
        second = redis_client.get_redis_client()

        assert first is second
        assert mock_pool.call_args.kwargs["host"] == "cache.local"
        assert mock_pool.call_args.kwargs["port"] == 6380
        mock_redis_cls.return_value.ping.assert_called_once()

    @patch("integrations.redis_client.get_settings")
    @patch("integrations.redis_client.Redis")
    @patch("integrations.redis_client.ConnectionPool")
    def test_failed_ping_raises(self, mock_pool, mock_redis_cls, mock_get_settings):
        """A client that cannot reach Redis is not cached."""
        mock_redis_cls.return_value.ping.side_effect = RedisConnectionError("refused")

        with pytest.raises(RedisConnectionError):
            redis_client.get_redis_client()

        mock_redis_cls.return_value.ping.side_effect = None
        assert redis_client.get_redis_client() is mock_redis_cls.return_value
