"""Durable text store abstract base class and in-memory implementation."""

from abc import ABC, abstractmethod
from typing import List, Optional

from multilang.logging import get_module_logger
from multilang.texts.models import TextRow

logger = get_module_logger()


class DurableStore(ABC):
    """Abstract base for the authoritative texts table.

    Rows are ``(key, value, locale, scope)``. Implementations raise
    ``StoreUnavailableError`` when the backend cannot be reached.
    """

    @abstractmethod
    def fetch_all(self, locale: Optional[str] = None) -> List[TextRow]:
        """Fetch every row for a locale, or for all locales when locale is None."""
        pass

    @abstractmethod
    def exists(self, key: str, locale: str) -> bool:
        """Check whether a row exists for the (key, locale) pair."""
        pass

    @abstractmethod
    def insert(self, key: str, locale: str, value: str) -> bool:
        """Insert a row.

        Returns:
            True when a row was written, False when the store rejected the
            row because the (key, locale) pair already exists.
        """
        pass

    def is_available(self) -> bool:
        """Whether the store is configured and usable."""
        return True


class InMemoryTextStore(DurableStore):
    """List-backed store for tests and local development.

    Like a table without a unique index, ``insert`` never rejects a row, so
    racing check-then-insert callers can produce duplicates.
    """

    def __init__(self, rows: Optional[List[TextRow]] = None):
        self.rows: List[TextRow] = list(rows or [])
        logger.info("initialized_memory_text_store", row_count=len(self.rows))

    def fetch_all(self, locale: Optional[str] = None) -> List[TextRow]:
        if locale is None:
            return list(self.rows)
        return [row for row in self.rows if row.locale == locale]

    def exists(self, key: str, locale: str) -> bool:
        return any(row.key == key and row.locale == locale for row in self.rows)

    def insert(self, key: str, locale: str, value: str) -> bool:
        self.rows.append(TextRow(key=key, value=value, locale=locale))
        return True
