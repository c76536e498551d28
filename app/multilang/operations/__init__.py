"""Operation result types and status enums."""

from multilang.operations.classifiers import (
    CONDITION_FAILED,
    classify_aws_error,
    classify_redis_error,
)
from multilang.operations.result import OperationResult, OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "CONDITION_FAILED",
    "classify_aws_error",
    "classify_redis_error",
]
