"""Tests for multilang.texts.backends.dynamodb_store module."""

from unittest.mock import patch

import pytest

from multilang.operations.classifiers import CONDITION_FAILED
from multilang.operations.result import OperationResult
from multilang.texts.backends.dynamodb_store import DynamoDBTextStore
from multilang.texts.exceptions import StoreUnavailableError
from multilang.texts.models import TextRow

pytestmark = pytest.mark.unit

MODULE = "multilang.texts.backends.dynamodb_store"


@pytest.fixture
def store():
    """Store on the texts table."""
    return DynamoDBTextStore(table_name="texts")


def _item(locale, key, value, scope=None):
    item = {"lang": {"S": locale}, "key": {"S": key}, "value": {"S": value}}
    if scope:
        item["scope"] = {"S": scope}
    return item


class TestFetchAll:
    """Tests for DynamoDBTextStore.fetch_all()."""

    @patch(f"{MODULE}.query")
    def test_fetch_locale_queries_partition(self, mock_query, store):
        """A locale is fetched with a query on the lang partition."""
        mock_query.return_value = OperationResult.success(
            data=[_item("en", "welcome", "Welcome", scope="global")]
        )

        rows = store.fetch_all("en")

        assert rows == [
            TextRow(key="welcome", value="Welcome", locale="en", scope="global")
        ]
        kwargs = mock_query.call_args.kwargs
        assert kwargs["table_name"] == "texts"
        assert kwargs["KeyConditionExpression"] == "#lang = :lang"
        assert kwargs["ExpressionAttributeValues"] == {":lang": {"S": "en"}}

    @patch(f"{MODULE}.scan")
    def test_fetch_all_locales_scans(self, mock_scan, store):
        """Without a locale the whole table is scanned."""
        mock_scan.return_value = OperationResult.success(
            data=[_item("en", "welcome", "Welcome"), _item("ka", "welcome", "გამარჯობა")]
        )

        rows = store.fetch_all()

        assert [row.locale for row in rows] == ["en", "ka"]
        mock_scan.assert_called_once_with(table_name="texts")

    @patch(f"{MODULE}.query")
    def test_empty_result(self, mock_query, store):
        """A locale without items yields no rows."""
        mock_query.return_value = OperationResult.success(data=[])
        assert store.fetch_all("ka") == []

    @patch(f"{MODULE}.query")
    def test_failure_raises(self, mock_query, store):
        """A failed query raises StoreUnavailableError with the result."""
        failed = OperationResult.transient_error(
            "AWS connection error", error_code="CONNECTION_ERROR"
        )
        mock_query.return_value = failed

        with pytest.raises(StoreUnavailableError) as exc_info:
            store.fetch_all("en")
        assert exc_info.value.result is failed


class TestExists:
    """Tests for DynamoDBTextStore.exists()."""

    @patch(f"{MODULE}.get_item")
    def test_item_found(self, mock_get_item, store):
        """A returned Item means the row exists."""
        mock_get_item.return_value = OperationResult.success(
            data={"Item": {"key": {"S": "welcome"}}}
        )

        assert store.exists("welcome", "en") is True
        assert mock_get_item.call_args.kwargs["Key"] == {
            "lang": {"S": "en"},
            "key": {"S": "welcome"},
        }

    @patch(f"{MODULE}.get_item")
    def test_item_absent(self, mock_get_item, store):
        """A response without Item means the row is absent."""
        mock_get_item.return_value = OperationResult.success(data={})
        assert store.exists("welcome", "ka") is False

    @patch(f"{MODULE}.get_item")
    def test_failure_raises(self, mock_get_item, store):
        """A failed read raises StoreUnavailableError."""
        mock_get_item.return_value = OperationResult.permanent_error(
            "AWS API access denied", error_code="FORBIDDEN"
        )
        with pytest.raises(StoreUnavailableError):
            store.exists("welcome", "en")


class TestInsert:
    """Tests for DynamoDBTextStore.insert()."""

    @patch(f"{MODULE}.put_item")
    def test_insert_is_conditional(self, mock_put_item, store):
        """Rows are written only when the pair does not exist yet."""
        mock_put_item.return_value = OperationResult.success(data={})

        assert store.insert("greeting", "ka", "greeting") is True

        kwargs = mock_put_item.call_args.kwargs
        assert kwargs["Item"] == _item("ka", "greeting", "greeting")
        assert kwargs["ConditionExpression"] == "attribute_not_exists(#key)"

    @patch(f"{MODULE}.put_item")
    def test_conflict_returns_false(self, mock_put_item, store):
        """A rejected conditional write is reported as not written."""
        mock_put_item.return_value = OperationResult.permanent_error(
            "Conditional write rejected", error_code=CONDITION_FAILED
        )
        assert store.insert("greeting", "ka", "greeting") is False

    @patch(f"{MODULE}.put_item")
    def test_failure_raises(self, mock_put_item, store):
        """Any other failure raises StoreUnavailableError."""
        mock_put_item.return_value = OperationResult.transient_error(
            "AWS API throttled", error_code="RATE_LIMITED"
        )
        with pytest.raises(StoreUnavailableError):
            store.insert("greeting", "ka", "greeting")
