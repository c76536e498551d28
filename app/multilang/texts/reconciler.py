"""Persistence of missing text keys.

Keys looked up without a translation are written to the durable store for
every configured locale, with the key itself as the placeholder value, so
that editors can translate them later.
"""

from typing import Mapping, Union

from multilang.configuration.settings import LOCAL
from multilang.logging import get_module_logger
from multilang.texts.models import LocaleTable, MissingKeySet
from multilang.texts.store import DurableStore

logger = get_module_logger()


def autosave_allowed(
    environment: str, autosave_enabled: bool, store_available: bool
) -> bool:
    """Whether missing keys may be persisted.

    Only a local environment with autosave enabled and a usable store
    qualifies.
    """
    return environment == LOCAL and bool(autosave_enabled) and bool(store_available)


class MissingKeyReconciler:
    """Writes missing keys into the durable store.

    Each (key, locale) pair is checked and inserted independently, without a
    transaction around the whole pass. Two concurrent flushes can both see a
    pair as absent; stores without a uniqueness constraint may then hold
    duplicate rows. A store that rejects the second insert reports it as not
    written, which is counted as a conflict.

    Attributes:
        store: Durable store receiving the rows.
    """

    def __init__(self, store: DurableStore):
        self.store = store

    def flush(
        self,
        missing_keys: Union[MissingKeySet, Mapping[str, str]],
        locale_table: LocaleTable,
    ) -> bool:
        """Insert every missing key for every configured locale.

        Existing (key, locale) rows are never overwritten.

        Args:
            missing_keys: Missing keys mapped to their placeholder values.
            locale_table: Configured locales.

        Returns:
            False when there was nothing to flush, True once the pass completes.

        Raises:
            StoreUnavailableError: If the store fails; rows inserted before the
                failure stay in place.
        """
        if not missing_keys:
            return False

        inserted = 0
        skipped = 0
        conflicts = 0

        for key, value in missing_keys.items():
            for locale in locale_table:
                if self.store.exists(key, locale):
                    skipped += 1
                    continue

                if self.store.insert(key, locale, value):
                    inserted += 1
                else:
                    conflicts += 1

        logger.info(
            "missing_texts_flushed",
            key_count=len(missing_keys),
            locale_count=len(locale_table),
            inserted=inserted,
            skipped=skipped,
            conflicts=conflicts,
        )
        return True
