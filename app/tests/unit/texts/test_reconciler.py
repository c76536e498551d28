"""Tests for multilang.texts.reconciler module."""

from unittest.mock import MagicMock

import pytest

from multilang.texts.exceptions import StoreUnavailableError
from multilang.texts.models import MissingKeySet, TextRow
from multilang.texts.reconciler import MissingKeyReconciler, autosave_allowed
from multilang.texts.store import DurableStore, InMemoryTextStore

pytestmark = pytest.mark.unit


class TestAutosaveAllowed:
    """Tests for the autosave_allowed() predicate."""

    def test_local_with_autosave_and_store(self):
        """Local environment with autosave and a store qualifies."""
        assert autosave_allowed("local", True, True) is True

    @pytest.mark.parametrize(
        "environment,autosave,store_available",
        [
            ("production", True, True),
            ("staging", True, True),
            ("local", False, True),
            ("local", True, False),
        ],
    )
    def test_everything_else_is_refused(self, environment, autosave, store_available):
        """Any other combination refuses autosave."""
        assert autosave_allowed(environment, autosave, store_available) is False


class TestFlush:
    """Tests for MissingKeyReconciler.flush()."""

    @pytest.fixture
    def store(self):
        return InMemoryTextStore()

    @pytest.fixture
    def reconciler(self, store):
        return MissingKeyReconciler(store)

    def test_empty_set_returns_false(self, reconciler, store, locale_table):
        """Nothing is written for an empty missing set."""
        assert reconciler.flush(MissingKeySet(), locale_table) is False
        assert reconciler.flush({}, locale_table) is False
        assert store.rows == []

    def test_inserts_every_key_for_every_locale(self, reconciler, store, locale_table):
        """Two keys and two locales produce four placeholder rows."""
        missing = MissingKeySet(["greeting", "farewell"])

        assert reconciler.flush(missing, locale_table) is True

        assert len(store.rows) == 4
        assert {(row.key, row.locale, row.value) for row in store.rows} == {
            ("greeting", "en", "greeting"),
            ("greeting", "ka", "greeting"),
            ("farewell", "en", "farewell"),
            ("farewell", "ka", "farewell"),
        }

    def test_second_flush_adds_nothing(self, reconciler, store, locale_table):
        """Flushing the same keys again inserts no new rows."""
        missing = MissingKeySet(["greeting", "farewell"])
        reconciler.flush(missing, locale_table)

        assert reconciler.flush(missing, locale_table) is True
        assert len(store.rows) == 4

    def test_existing_rows_are_not_overwritten(self, store, locale_table):
        """An existing translation is kept; only absent pairs are written."""
        store.rows.append(TextRow(key="greeting", value="Hello", locale="en"))
        reconciler = MissingKeyReconciler(store)

        reconciler.flush(MissingKeySet(["greeting"]), locale_table)

        assert store.fetch_all("en") == [
            TextRow(key="greeting", value="Hello", locale="en")
        ]
        assert store.fetch_all("ka") == [
            TextRow(key="greeting", value="greeting", locale="ka")
        ]

    def test_rejected_insert_counts_as_conflict(self, locale_table):
        """A store refusing a duplicate insert does not fail the flush."""
        store = MagicMock(spec=DurableStore)
        store.exists.return_value = False
        store.insert.return_value = False
        reconciler = MissingKeyReconciler(store)

        assert reconciler.flush(MissingKeySet(["greeting"]), locale_table) is True
        assert store.insert.call_count == 2

    def test_store_failure_propagates(self, locale_table):
        """A store failure stops the pass and is raised."""
        store = MagicMock(spec=DurableStore)
        store.exists.side_effect = StoreUnavailableError("down")
        reconciler = MissingKeyReconciler(store)

        with pytest.raises(StoreUnavailableError):
            reconciler.flush(MissingKeySet(["greeting"]), locale_table)
        store.insert.assert_not_called()
