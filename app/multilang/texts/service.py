"""Texts service for dependency injection.

Bundles the settings, the backends, the locale table and the reconciler so
the serving layer has one object to create registries and persist missing
keys with.
"""

from collections import defaultdict
from typing import TYPE_CHECKING, Dict, Optional

from multilang.logging import get_module_logger
from multilang.texts.cache import CacheGateway
from multilang.texts.models import LocaleTable
from multilang.texts.reconciler import MissingKeyReconciler, autosave_allowed
from multilang.texts.registry import TextRegistry
from multilang.texts.resolvers import LocaleDetector
from multilang.texts.store import DurableStore

if TYPE_CHECKING:
    from multilang.configuration import Settings

logger = get_module_logger()


class TextService:
    """Application-scoped entry point of the texts system.

    Registries are request-scoped; the service is not. Create one registry
    per request with ``create_registry`` and never share it between requests.

    Usage:
        service = TextService(settings, store=store, cache=cache)

        registry = service.create_registry()
        registry.activate(service.detector.detect(["en", "about"]))
        title = registry.get("about.title")

        if service.autosave_allowed():
            service.save_missing(registry)
    """

    def __init__(
        self,
        settings: "Settings",
        store: DurableStore,
        cache: Optional[CacheGateway] = None,
    ):
        """Initialize texts service.

        Args:
            settings: Settings instance (passed from provider).
            store: Durable texts store.
            cache: Optional snapshot cache.
        """
        self._settings = settings
        self.store = store
        self.cache = cache
        self.locale_table = LocaleTable.from_settings(settings.locales)
        self.detector = LocaleDetector(self.locale_table)
        self.reconciler = MissingKeyReconciler(store)
        logger.info(
            "initialized_text_service",
            environment=settings.ENVIRONMENT,
            locales=list(self.locale_table),
            cache=type(cache).__name__ if cache else None,
        )

    def create_registry(self) -> TextRegistry:
        """Create a registry for one request or session."""
        return TextRegistry(self._settings, store=self.store, cache=self.cache)

    def autosave_allowed(self) -> bool:
        """Whether missing keys may be persisted in this environment."""
        return autosave_allowed(
            self._settings.ENVIRONMENT,
            self._settings.db.autosave,
            self.store is not None and self.store.is_available(),
        )

    def save_missing(self, registry: TextRegistry) -> bool:
        """Persist the registry's missing keys and start a new missing set.

        Returns:
            False when the registry had no missing keys, True otherwise.

        Raises:
            StoreUnavailableError: If the store fails; the missing set is kept.
        """
        flushed = self.reconciler.flush(registry.missing_keys(), self.locale_table)
        if flushed:
            registry.reset_missing_keys()
        return flushed

    def export_texts(self, locale: Optional[str] = None) -> Dict[str, Dict[str, str]]:
        """Export texts grouped by locale, for one locale or all of them.

        Raises:
            StoreUnavailableError: If the store cannot be read.
        """
        exported: Dict[str, Dict[str, str]] = defaultdict(dict)
        for row in self.store.fetch_all(locale):
            exported[row.locale][row.key] = row.value
        logger.info(
            "texts_exported",
            locale=locale,
            locale_count=len(exported),
        )
        return dict(exported)
