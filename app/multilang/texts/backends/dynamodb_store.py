"""DynamoDB-backed durable text store."""

from typing import Any, Dict, List, Optional

from integrations.aws.dynamodb import get_item, put_item, query, scan
from multilang.logging import get_module_logger
from multilang.operations.classifiers import CONDITION_FAILED
from multilang.operations.result import OperationResult
from multilang.texts.exceptions import StoreUnavailableError
from multilang.texts.models import TextRow
from multilang.texts.store import DurableStore

logger = get_module_logger()

PARTITION_KEY = "lang"
SORT_KEY = "key"


def _string(item: Dict[str, Any], attribute: str) -> Optional[str]:
    value = item.get(attribute)
    # DynamoDB stores strings in {"S": "value"} format
    if isinstance(value, dict):
        return value.get("S")
    return value


class DynamoDBTextStore(DurableStore):
    """Texts table in DynamoDB.

    Table layout:
    - PK: lang (string), the locale code
    - SK: key (string), the text key
    - Attributes: value (string), scope (string, optional)

    Inserts are conditional on the (lang, key) pair being absent, so a row
    written by a concurrent flush is never duplicated or overwritten.
    """

    def __init__(self, table_name: str):
        """Initialize the store.

        Args:
            table_name: DynamoDB table holding the texts.
        """
        self.table_name = table_name
        logger.info("initialized_dynamodb_text_store", table_name=table_name)

    def _error(self, operation: str, result: OperationResult) -> StoreUnavailableError:
        logger.error(
            "text_store_operation_failed",
            operation=operation,
            table_name=self.table_name,
            error=result.message,
            error_code=result.error_code,
        )
        return StoreUnavailableError(
            f"Text store {operation} failed on {self.table_name}: {result.message}",
            result,
        )

    def _to_row(self, item: Dict[str, Any]) -> TextRow:
        return TextRow(
            key=_string(item, SORT_KEY),
            value=_string(item, "value") or "",
            locale=_string(item, PARTITION_KEY),
            scope=_string(item, "scope"),
        )

    def fetch_all(self, locale: Optional[str] = None) -> List[TextRow]:
        if locale is None:
            result = scan(table_name=self.table_name)
            operation = "scan"
        else:
            result = query(
                table_name=self.table_name,
                KeyConditionExpression="#lang = :lang",
                ExpressionAttributeNames={"#lang": PARTITION_KEY},
                ExpressionAttributeValues={":lang": {"S": locale}},
            )
            operation = "query"

        if not result.is_success:
            raise self._error(operation, result)

        return [self._to_row(item) for item in result.data or []]

    def exists(self, key: str, locale: str) -> bool:
        result = get_item(
            table_name=self.table_name,
            Key={PARTITION_KEY: {"S": locale}, SORT_KEY: {"S": key}},
            ProjectionExpression="#key",
            ExpressionAttributeNames={"#key": SORT_KEY},
        )
        if not result.is_success:
            raise self._error("get_item", result)
        return bool(result.data and "Item" in result.data)

    def insert(self, key: str, locale: str, value: str) -> bool:
        result = put_item(
            table_name=self.table_name,
            Item={
                PARTITION_KEY: {"S": locale},
                SORT_KEY: {"S": key},
                "value": {"S": value},
            },
            ConditionExpression="attribute_not_exists(#key)",
            ExpressionAttributeNames={"#key": SORT_KEY},
        )
        if result.is_success:
            return True
        if result.error_code == CONDITION_FAILED:
            logger.info("text_row_already_exists", key=key, locale=locale)
            return False
        raise self._error("put_item", result)
