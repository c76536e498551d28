"""Error classifiers for backend exceptions.

Converts AWS SDK and Redis exceptions into standardized OperationResult
objects so the store and cache adapters only ever deal with results.

Usage:
    from multilang.operations.classifiers import classify_aws_error

    try:
        response = client.get_item(TableName=table, Key=key)
    except ClientError as e:
        return classify_aws_error(e)
"""

from botocore.exceptions import ClientError
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from multilang.operations.result import OperationResult, OperationStatus

CONDITION_FAILED = "CONDITION_FAILED"


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Error Code Mapping:
    - ThrottlingException / ProvisionedThroughputExceededException → TRANSIENT_ERROR
    - AccessDeniedException: Permission denied → PERMANENT_ERROR
    - ResourceNotFoundException: Not found → NOT_FOUND
    - ConditionalCheckFailedException: Conditional write rejected → PERMANENT_ERROR
    - ValidationException: Bad input → PERMANENT_ERROR
    - Other: Unknown error → TRANSIENT_ERROR (AWS convention)

    Args:
        exc: Exception raised by boto3/botocore

    Returns:
        OperationResult with status, message and error_code
    """
    if not isinstance(exc, ClientError):
        # BotoCoreError (endpoint, credentials, timeouts)
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_code = "Unknown"
    if hasattr(exc, "response") and exc.response:
        error_code = exc.response.get("Error", {}).get("Code", "Unknown")

    if error_code in ("ThrottlingException", "ProvisionedThroughputExceededException"):
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "AWS API throttled",
            error_code="RATE_LIMITED",
            retry_after=60,
        )

    if error_code == "AccessDeniedException":
        return OperationResult.permanent_error(
            "AWS API access denied",
            error_code="FORBIDDEN",
        )

    if error_code == "ResourceNotFoundException":
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "AWS resource not found",
            error_code="NOT_FOUND",
        )

    if error_code == "ConditionalCheckFailedException":
        return OperationResult.permanent_error(
            "Conditional write rejected",
            error_code=CONDITION_FAILED,
        )

    if error_code in ("ValidationException", "InvalidParameterException"):
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}",
            error_code="INVALID_REQUEST",
        )

    return OperationResult.transient_error(
        f"AWS client error: {error_code}",
        error_code="AWS_CLIENT_ERROR",
    )


def classify_redis_error(exc: Exception) -> OperationResult:
    """Classify redis-py errors into OperationResult.

    Connection and timeout errors are transient; anything else raised by the
    client (bad command, wrong type, decode error) is permanent.
    """
    if isinstance(exc, (RedisConnectionError, RedisTimeoutError)):
        return OperationResult.transient_error(
            f"Redis connection error: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    return OperationResult.permanent_error(
        f"Redis error: {type(exc).__name__}: {str(exc)}",
        error_code="REDIS_ERROR",
    )
