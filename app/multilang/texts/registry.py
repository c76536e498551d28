"""Text registry: cache-aside loading and lookup of locale texts.

One TextRegistry belongs to one request or session. It holds the active
locale, that locale's immutable TextSnapshot and the keys that were looked
up without a translation. It does no locking: a registry shared between
concurrent callers must be synchronized by those callers.
"""

from typing import TYPE_CHECKING, Mapping, Optional

from multilang.configuration.settings import PRODUCTION
from multilang.logging import get_module_logger
from multilang.texts.cache import CacheGateway
from multilang.texts.exceptions import CacheUnavailableError, InvalidInputError
from multilang.texts.models import MissingKeySet, TextSnapshot
from multilang.texts.resolvers import localized_path
from multilang.texts.store import DurableStore

if TYPE_CHECKING:
    from multilang.configuration import Settings

logger = get_module_logger()


class TextRegistry:
    """Resolves text keys for the active locale.

    Snapshots are loaded cache-aside: in production with the cache enabled
    a cached snapshot is served when present, otherwise the store is read and
    the cache repopulated. Outside production, or with the cache disabled,
    every load reads the store directly.

    Lookups never fail for a missing translation: the key itself is returned
    and recorded in the missing set for later reconciliation.

    Cache failures are not fatal. A ``CacheUnavailableError`` while reading
    falls back to the store; one while writing is logged and ignored.
    Store failures (``StoreUnavailableError``) propagate to the caller.

    Attributes:
        store: Authoritative texts store.
        cache: Snapshot cache, or None when no cache is configured.
    """

    def __init__(
        self,
        settings: "Settings",
        store: DurableStore,
        cache: Optional[CacheGateway] = None,
    ):
        """Initialize the registry.

        Args:
            settings: Settings providing the environment, cache and table options.
            store: Durable store the snapshots are loaded from.
            cache: Optional snapshot cache.
        """
        self.store = store
        self.cache = cache
        self._environment = settings.ENVIRONMENT
        self._cache_enabled = settings.cache.enabled
        self._cache_ttl = settings.cache.lifetime_seconds
        self._texts_table = settings.db.texts_table

        self._locale: Optional[str] = None
        self._texts: Optional[TextSnapshot] = None
        self._missing = MissingKeySet()

    def activate(self, locale: str, texts: Optional[Mapping[str, str]] = None) -> None:
        """Make a locale active and load its texts.

        When ``texts`` is given it becomes the snapshot as-is and nothing is
        loaded. Activation replaces the previous snapshot and starts a new
        missing set; the previous state is kept if loading fails.

        Args:
            locale: Locale to activate.
            texts: Optional explicit texts, bypassing cache and store.

        Raises:
            InvalidInputError: If locale is empty.
            StoreUnavailableError: If the store cannot be read.
        """
        if not locale:
            raise InvalidInputError("Locale is empty")

        if texts is None:
            snapshot = self.load(locale)
        else:
            snapshot = TextSnapshot(locale=locale, texts=texts)

        self._locale = locale
        self._texts = snapshot
        self._missing = MissingKeySet()
        logger.debug("texts_locale_activated", locale=locale, text_count=len(snapshot))

    def load(self, locale: str) -> TextSnapshot:
        """Load the snapshot for a locale, cache-aside.

        Raises:
            StoreUnavailableError: If the store cannot be read.
        """
        if not self._cache_in_use():
            logger.debug(
                "texts_cache_bypassed",
                locale=locale,
                environment=self._environment,
                cache_enabled=self._cache_enabled,
            )
            return self._load_from_store(locale)

        name = self.cache_name(locale)
        try:
            if self.cache.has(name):
                snapshot = self.cache.get(name)
                # Entry may expire between has() and get()
                if snapshot is not None:
                    logger.debug("texts_loaded_from_cache", locale=locale, cache_name=name)
                    return snapshot
        except CacheUnavailableError as e:
            logger.warning(
                "texts_cache_read_failed",
                locale=locale,
                cache_name=name,
                error=str(e),
            )
            return self._load_from_store(locale)

        snapshot = self._load_from_store(locale)
        self._store_in_cache(name, snapshot)
        return snapshot

    def get(self, key: str) -> str:
        """Return the text for a key, or the key itself.

        The key is returned unchanged when no locale is active or when the
        active snapshot has no text for it; in the latter case the key is
        recorded as missing.

        Raises:
            InvalidInputError: If key is empty.
        """
        if not key:
            raise InvalidInputError("String key not provided")

        if not self._locale:
            return key

        if key not in self._texts:
            if self._missing.add(key):
                logger.debug("missing_text_recorded", key=key, locale=self._locale)
            return key

        return self._texts[key]

    def set_texts(self, texts: Mapping[str, str]) -> None:
        """Replace the snapshot of the active locale with explicit texts."""
        self._texts = TextSnapshot(locale=self._locale, texts=texts)

    def current_texts(self) -> Optional[TextSnapshot]:
        """Snapshot of the active locale, None before activation."""
        return self._texts

    def current_locale(self) -> Optional[str]:
        """Active locale, None before activation."""
        return self._locale

    def missing_keys(self) -> MissingKeySet:
        """Keys looked up without a translation since the last activation."""
        return self._missing

    def reset_missing_keys(self) -> None:
        """Start a new missing set, e.g. after the keys were persisted."""
        self._missing = MissingKeySet()

    def cache_name(self, locale: str) -> str:
        """Cache entry name for a locale: ``{texts_table}_{locale}``."""
        return f"{self._texts_table}_{locale}"

    def url(self, path: str) -> str:
        """Prefix a path with the active locale."""
        return localized_path(path, self._locale)

    def _cache_in_use(self) -> bool:
        return (
            self.cache is not None
            and self._cache_enabled
            and self._environment == PRODUCTION
        )

    def _load_from_store(self, locale: str) -> TextSnapshot:
        rows = self.store.fetch_all(locale)
        snapshot = TextSnapshot.from_rows(locale, rows)
        logger.info("texts_loaded_from_store", locale=locale, text_count=len(snapshot))
        return snapshot

    def _store_in_cache(self, name: str, snapshot: TextSnapshot) -> None:
        try:
            self.cache.put(name, snapshot, self._cache_ttl)
        except CacheUnavailableError as e:
            logger.warning("texts_cache_write_failed", cache_name=name, error=str(e))
