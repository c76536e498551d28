"""AWS client module.

Centralized error handling, retry logic and pagination for boto3 calls made
by the durable text store. Every call returns an OperationResult; AWS errors
are classified instead of raised.

Usage:
    result = execute_aws_api_call(
        service_name="dynamodb",
        method="get_item",
        TableName="texts",
        Key={"lang": {"S": "en"}, "key": {"S": "welcome"}},
    )
    if result.is_success:
        item = result.data.get("Item")
"""

import time
from functools import lru_cache
from typing import Any, Callable, List, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore

from multilang.logging import get_module_logger
from multilang.operations.classifiers import CONDITION_FAILED, classify_aws_error
from multilang.operations.result import OperationResult
from multilang.services.providers import get_settings

logger = get_module_logger()

RETRY_ERRORS = (
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "ProvisionedThroughputExceededException",
)
DEFAULT_MAX_RETRIES = 3
DEFAULT_BACKOFF_FACTOR = 0.5


def _error_code(error: Exception) -> Optional[str]:
    response = getattr(error, "response", None)
    if not isinstance(response, dict):
        return None
    return response.get("Error", {}).get("Code")


def _should_retry(error: Exception, attempt: int, max_attempts: int) -> bool:
    return _error_code(error) in RETRY_ERRORS and attempt < max_attempts


def _calculate_retry_delay(attempt: int) -> float:
    return DEFAULT_BACKOFF_FACTOR * (2**attempt)


@lru_cache
def get_aws_client(
    service_name: str,
    region_name: Optional[str] = None,
    endpoint_url: Optional[str] = None,
) -> BaseClient:
    """Create (once per service/region/endpoint) a boto3 service client.

    Args:
        service_name: The name of the AWS service.
        region_name: AWS region, defaults to the configured region.
        endpoint_url: Optional endpoint override (e.g. DynamoDB Local).
    """
    settings = get_settings()
    region_name = region_name or settings.db.AWS_REGION
    endpoint_url = endpoint_url or settings.db.DYNAMODB_ENDPOINT_URL
    session = boto3.Session(region_name=region_name)
    if endpoint_url:
        return session.client(service_name, endpoint_url=endpoint_url)
    return session.client(service_name)


def _paginate_all_results(
    client: BaseClient, method: str, keys: Optional[List[str]] = None, **kwargs
) -> List[dict]:
    paginator = client.get_paginator(method)
    results = []
    for page in paginator.paginate(**kwargs):
        if keys is None:
            for key, value in page.items():
                if key != "ResponseMetadata":
                    if isinstance(value, list):
                        results.extend(value)
                    else:
                        results.append(value)
        else:
            for key in keys:
                if key in page:
                    results.extend(page[key])
    return results


def execute_api_call(
    func_name: str,
    api_call: Callable[[], Any],
    max_retries: Optional[int] = None,
) -> OperationResult:
    """Run an AWS API call with retries on throttling.

    Args:
        func_name: Name of the call, used for logging
        api_call: Zero-argument callable performing the request
        max_retries: Override default max retries

    Returns:
        OperationResult: SUCCESS with the call's return value as data, or the
        classified error of the last attempt.
    """
    max_retry_attempts = max_retries if max_retries is not None else DEFAULT_MAX_RETRIES

    for attempt in range(max_retry_attempts + 1):
        try:
            logger.debug(
                "aws_api_call_start",
                function=func_name,
                attempt=attempt + 1,
                max_attempts=max_retry_attempts + 1,
            )
            result = api_call()
            if attempt > 0:
                logger.info(
                    "aws_api_retry_success",
                    function=func_name,
                    attempt=attempt + 1,
                )
            return OperationResult.success(data=result, message=f"{func_name} ok")

        except (BotoCoreError, ClientError) as e:
            if _should_retry(e, attempt, max_retry_attempts):
                delay = _calculate_retry_delay(attempt)
                logger.warning(
                    "aws_api_retrying",
                    function=func_name,
                    attempt=attempt + 1,
                    error=str(e),
                    delay=delay,
                )
                time.sleep(delay)
                continue

            result = classify_aws_error(e)
            log = logger.warning if result.error_code == CONDITION_FAILED else logger.error
            log(
                "aws_api_error_final",
                function=func_name,
                error=str(e),
                error_code=_error_code(e),
            )
            return result

    # Unreachable: the last attempt never retries
    return OperationResult.transient_error(f"{func_name} exhausted retries")


def execute_aws_api_call(
    service_name: str,
    method: str,
    keys: Optional[List[str]] = None,
    max_retries: Optional[int] = None,
    force_paginate: bool = False,
    **kwargs,
) -> OperationResult:
    """Execute a boto3 client method with error handling.

    Args:
        service_name: The name of the AWS service.
        method: The method to call on the service client.
        keys: Keys to extract from paginated results.
        max_retries: Override default max retries.
        force_paginate: Collect every page through the method's paginator.
        **kwargs: Keyword arguments for the API call.

    Returns:
        OperationResult wrapping the response (or the list of paginated items).
    """

    def api_call():
        client = get_aws_client(service_name)
        if force_paginate:
            return _paginate_all_results(client, method, keys, **kwargs)
        return getattr(client, method)(**kwargs)

    return execute_api_call(
        f"{service_name}_{method}",
        api_call,
        max_retries=max_retries,
    )
