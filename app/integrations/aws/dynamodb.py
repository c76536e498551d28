"""AWS DynamoDB module.

Simplified, standardized functions for the DynamoDB operations the text
store needs. Every function returns an OperationResult.

Usage:
    result = get_item(
        table_name="texts",
        Key={"lang": {"S": "en"}, "key": {"S": "welcome"}},
    )
    if result.is_success:
        item = result.data.get("Item")
"""

from typing import Any, Dict

from integrations.aws.client import execute_aws_api_call
from multilang.operations.result import OperationResult


def get_item(
    table_name: str,
    Key: Dict[str, Any],
    **kwargs,
) -> OperationResult:
    """Get an item from a DynamoDB table.

    Args:
        table_name: DynamoDB table name
        Key: Primary key attributes (DynamoDB format)
        **kwargs: Additional parameters for get_item call

    Returns:
        OperationResult: Response dict (``Item`` absent when not found)
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="get_item",
        TableName=table_name,
        Key=Key,
        **kwargs,
    )


def put_item(
    table_name: str,
    Item: Dict[str, Any],
    **kwargs,
) -> OperationResult:
    """Put an item into a DynamoDB table.

    Args:
        table_name: DynamoDB table name
        Item: Item attributes (DynamoDB format)
        **kwargs: Additional parameters, e.g. ConditionExpression

    Returns:
        OperationResult: Success or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="put_item",
        TableName=table_name,
        Item=Item,
        **kwargs,
    )


def query(
    table_name: str,
    KeyConditionExpression: str,
    **kwargs,
) -> OperationResult:
    """Query a DynamoDB table with automatic pagination.

    Returns:
        OperationResult: List of items or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="query",
        TableName=table_name,
        KeyConditionExpression=KeyConditionExpression,
        keys=["Items"],
        force_paginate=True,
        **kwargs,
    )


def scan(
    table_name: str,
    **kwargs,
) -> OperationResult:
    """Scan a DynamoDB table with automatic pagination.

    Returns:
        OperationResult: List of items or error details
    """
    return execute_aws_api_call(
        service_name="dynamodb",
        method="scan",
        TableName=table_name,
        keys=["Items"],
        force_paginate=True,
        **kwargs,
    )
