"""Snapshot cache gateway abstract base class and in-memory implementation."""

import time
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional, Tuple

from multilang.logging import get_module_logger
from multilang.texts.models import TextSnapshot

logger = get_module_logger()


class CacheGateway(ABC):
    """Abstract base class for text snapshot caches.

    Entries are addressed by cache name (``{texts_table}_{locale}``) and
    expire after the TTL given to ``put``. Implementations raise
    ``CacheUnavailableError`` when the backend cannot be reached.
    """

    @abstractmethod
    def has(self, name: str) -> bool:
        """Check whether a live entry exists for the cache name."""
        pass

    @abstractmethod
    def get(self, name: str) -> Optional[TextSnapshot]:
        """Get the cached snapshot, or None if absent/expired."""
        pass

    @abstractmethod
    def put(self, name: str, snapshot: TextSnapshot, ttl_seconds: int) -> None:
        """Store a snapshot under the cache name for ttl_seconds."""
        pass

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics (implementation-specific)."""
        return {"backend": type(self).__name__}


class InMemoryCacheGateway(CacheGateway):
    """Process-local cache with monotonic-clock expiry.

    Suitable for tests and single-process local development. Entries are
    evicted lazily when read after expiry.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._entries: Dict[str, Tuple[TextSnapshot, float]] = {}
        logger.info("initialized_memory_texts_cache")

    def _live_entry(self, name: str) -> Optional[TextSnapshot]:
        entry = self._entries.get(name)
        if entry is None:
            return None
        snapshot, expires_at = entry
        if self._clock() >= expires_at:
            del self._entries[name]
            logger.debug("texts_cache_entry_expired", cache_name=name)
            return None
        return snapshot

    def has(self, name: str) -> bool:
        return self._live_entry(name) is not None

    def get(self, name: str) -> Optional[TextSnapshot]:
        return self._live_entry(name)

    def put(self, name: str, snapshot: TextSnapshot, ttl_seconds: int) -> None:
        self._entries[name] = (snapshot, self._clock() + ttl_seconds)
        logger.debug("texts_cache_entry_stored", cache_name=name, ttl_seconds=ttl_seconds)

    def clear(self) -> None:
        """Drop every entry (for testing)."""
        self._entries.clear()

    def get_stats(self) -> Dict[str, Any]:
        return {"backend": "memory", "entries": len(self._entries)}
