"""Texts system - locale text resolution with cache-aside loading.

Main components:
- models: TextSnapshot, TextRow, LocaleEntry, LocaleTable, MissingKeySet
- cache / store: CacheGateway and DurableStore interfaces, in-memory versions
- registry: TextRegistry, the per-request resolver
- reconciler: MissingKeyReconciler and the autosave predicate
- resolvers: LocaleDetector for path based locale detection
- service: TextService tying the above to settings
- backends: Redis cache and DynamoDB store
"""

from multilang.texts.cache import CacheGateway, InMemoryCacheGateway
from multilang.texts.exceptions import (
    CacheUnavailableError,
    InvalidInputError,
    MultiLangError,
    StoreUnavailableError,
)
from multilang.texts.models import (
    LocaleEntry,
    LocaleTable,
    MissingKeySet,
    TextRow,
    TextSnapshot,
)
from multilang.texts.reconciler import MissingKeyReconciler, autosave_allowed
from multilang.texts.registry import TextRegistry
from multilang.texts.resolvers import LocaleDetector, localized_path, path_segments
from multilang.texts.service import TextService
from multilang.texts.store import DurableStore, InMemoryTextStore

__all__ = [
    "CacheGateway",
    "InMemoryCacheGateway",
    "DurableStore",
    "InMemoryTextStore",
    "TextSnapshot",
    "TextRow",
    "LocaleEntry",
    "LocaleTable",
    "MissingKeySet",
    "TextRegistry",
    "MissingKeyReconciler",
    "autosave_allowed",
    "LocaleDetector",
    "localized_path",
    "path_segments",
    "TextService",
    "MultiLangError",
    "InvalidInputError",
    "StoreUnavailableError",
    "CacheUnavailableError",
]
