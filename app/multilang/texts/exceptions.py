"""Exceptions for the texts system."""

from typing import Optional

from multilang.operations.result import OperationResult


class MultiLangError(Exception):
    """Base exception for all text resolution errors."""


class InvalidInputError(MultiLangError, ValueError):
    """Raised for an empty locale or an empty text key.

    Example:
        >>> registry.get("")
        Traceback (most recent call last):
        ...
        InvalidInputError: String key not provided
    """


class BackendUnavailableError(MultiLangError):
    """A cache or store call failed.

    Attributes:
        result: The failed OperationResult reported by the backend, if any.
    """

    def __init__(self, message: str, result: Optional[OperationResult] = None):
        super().__init__(message)
        self.result = result


class StoreUnavailableError(BackendUnavailableError):
    """The durable store could not be read or written."""


class CacheUnavailableError(BackendUnavailableError):
    """The snapshot cache could not be read or written."""
