"""Redis client for the text snapshot cache.

Provides a pooled Redis connection and key/value helpers with TTL support.
Every helper returns an OperationResult; Redis errors are classified, not
raised.

Usage:
    from integrations.redis_client import set_value, get_value

    result = set_value("texts_en", {"welcome": "Welcome"}, ttl_seconds=86400)
    if result.is_success:
        print("Snapshot cached")

    result = get_value("texts_en")
    if result.is_success and result.data:
        texts = result.data
"""

import json
from typing import Any, Optional

from redis import ConnectionPool, Redis, RedisError  # type: ignore

from multilang.logging import get_module_logger
from multilang.operations.classifiers import classify_redis_error
from multilang.operations.result import OperationResult
from multilang.services.providers import get_settings

logger = get_module_logger()

# Global connection pool (initialized on first use)
_connection_pool: Optional[ConnectionPool] = None
_redis_client: Optional[Redis] = None


def get_redis_client() -> Redis:
    """Get or create the Redis client with connection pooling.

    Returns:
        Redis: Redis client instance with connection pooling

    Raises:
        redis.exceptions.ConnectionError: If unable to connect
    """
    global _connection_pool, _redis_client

    if _redis_client is not None:
        return _redis_client

    settings = get_settings()

    if _connection_pool is None:
        _connection_pool = ConnectionPool(
            host=settings.cache.REDIS_HOST,
            port=settings.cache.REDIS_PORT,
            db=0,
            decode_responses=True,
            max_connections=10,
            socket_timeout=5,
            socket_connect_timeout=5,
            retry_on_timeout=True,
            health_check_interval=30,
        )
        logger.info(
            "redis_connection_pool_created",
            host=settings.cache.REDIS_HOST,
            port=settings.cache.REDIS_PORT,
        )

    client = Redis(connection_pool=_connection_pool)
    try:
        client.ping()
    except RedisError as e:
        logger.error(
            "redis_connection_failed",
            error=str(e),
            host=settings.cache.REDIS_HOST,
        )
        raise

    _redis_client = client
    logger.info("redis_client_connected")
    return _redis_client


def reset_redis_client() -> None:
    """Drop the cached client and pool (for tests and reconfiguration)."""
    global _connection_pool, _redis_client
    _connection_pool = None
    _redis_client = None


def set_value(
    key: str,
    value: Any,
    ttl_seconds: Optional[int] = None,
) -> OperationResult:
    """Set a key-value pair with optional TTL.

    Args:
        key: The key to set
        value: The value (JSON-serialized if dict/list)
        ttl_seconds: Optional expiration time in seconds

    Returns:
        OperationResult: Success/failure result
    """
    if isinstance(value, (dict, list)):
        serialized_value = json.dumps(value)
    else:
        serialized_value = str(value)

    try:
        client = get_redis_client()
        if ttl_seconds:
            client.setex(key, ttl_seconds, serialized_value)
            logger.debug("redis_set_with_ttl", key=key, ttl_seconds=ttl_seconds)
        else:
            client.set(key, serialized_value)
            logger.debug("redis_set", key=key)
        return OperationResult.success(message=f"Value set for key: {key}")

    except RedisError as e:
        logger.error("redis_set_error", key=key, error=str(e))
        return classify_redis_error(e)


def get_value(key: str, deserialize_json: bool = True) -> OperationResult:
    """Get a value by key.

    Args:
        key: The key to retrieve
        deserialize_json: Attempt to deserialize as JSON (default: True)

    Returns:
        OperationResult: Result with data=value or data=None if not found
    """
    try:
        client = get_redis_client()
        value = client.get(key)
    except RedisError as e:
        logger.error("redis_get_error", key=key, error=str(e))
        return classify_redis_error(e)

    if value is None:
        logger.debug("redis_key_not_found", key=key)
        return OperationResult.success(message=f"Key not found: {key}", data=None)

    if deserialize_json:
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            # Not JSON, return as string
            pass

    logger.debug("redis_get_success", key=key)
    return OperationResult.success(message=f"Value retrieved for key: {key}", data=value)


def exists(key: str) -> OperationResult:
    """Check if a key exists.

    Returns:
        OperationResult: Result with data=True/False
    """
    try:
        client = get_redis_client()
        exists_count = client.exists(key)
    except RedisError as e:
        logger.error("redis_exists_error", key=key, error=str(e))
        return classify_redis_error(e)

    logger.debug("redis_exists", key=key, exists=exists_count > 0)
    return OperationResult.success(
        message=f"Key existence checked: {key}",
        data=exists_count > 0,
    )
