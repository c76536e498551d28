"""Redis-backed snapshot cache."""

from typing import Any, Dict, Optional

from integrations.redis_client import exists, get_value, set_value
from multilang.logging import get_module_logger
from multilang.texts.cache import CacheGateway
from multilang.texts.exceptions import CacheUnavailableError
from multilang.texts.models import TextSnapshot

logger = get_module_logger()


class RedisCacheGateway(CacheGateway):
    """Snapshot cache stored in Redis.

    Snapshots are stored as JSON (``TextSnapshot.to_dict``) under the cache
    name with ``SETEX`` so Redis expires them. Suitable for deployments with
    several application instances sharing one cache.
    """

    def get_stats(self) -> Dict[str, Any]:
        return {"backend": "redis"}

    def has(self, name: str) -> bool:
        result = exists(name)
        if not result.is_success:
            raise CacheUnavailableError(f"Cache check failed for {name}", result)
        return bool(result.data)

    def get(self, name: str) -> Optional[TextSnapshot]:
        result = get_value(name)
        if not result.is_success:
            raise CacheUnavailableError(f"Cache read failed for {name}", result)

        if result.data is None:
            logger.debug("texts_cache_miss", cache_name=name)
            return None

        try:
            return TextSnapshot.from_dict(result.data)
        except ValueError as e:
            # Unreadable entry: treat as a miss so the store repopulates it
            logger.warning("texts_cache_entry_invalid", cache_name=name, error=str(e))
            return None

    def put(self, name: str, snapshot: TextSnapshot, ttl_seconds: int) -> None:
        result = set_value(name, snapshot.to_dict(), ttl_seconds=ttl_seconds)
        if not result.is_success:
            raise CacheUnavailableError(f"Cache write failed for {name}", result)
