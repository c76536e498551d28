"""Cache and store backends for the texts system."""

from multilang.texts.backends.dynamodb_store import DynamoDBTextStore
from multilang.texts.backends.redis_cache import RedisCacheGateway

__all__ = ["DynamoDBTextStore", "RedisCacheGateway"]
