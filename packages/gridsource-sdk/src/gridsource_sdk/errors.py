from enum import Enum
from typing import Any, Optional


class ErrorCode(str, Enum):
    """Standardized error codes raised by grid source collaborators."""
    REPOSITORY_NOT_CONFIGURED = "REPOSITORY_NOT_CONFIGURED"
    REPOSITORY_NOT_FOUND = "REPOSITORY_NOT_FOUND"
    REPOSITORY_METHOD_NOT_FOUND = "REPOSITORY_METHOD_NOT_FOUND"
    RECORD_TYPE_UNRESOLVED = "RECORD_TYPE_UNRESOLVED"
    ACCESSOR_NOT_FOUND = "ACCESSOR_NOT_FOUND"


class GridSourceError(Exception):
    """Base error for grid source collaborators.

    Attributes:
        error_code (ErrorCode): The standardized error code.
        details (Optional[Any]): Additional context, e.g. the offending config value.
    """

    error_code: Optional[ErrorCode] = None

    def __init__(self, message: str, error_code: Optional[ErrorCode] = None, details: Optional[Any] = None):
        super().__init__(message)
        if error_code is not None:
            self.error_code = error_code
        self.details = details


class RepositoryConfigurationError(GridSourceError):
    """The configured repository list method cannot be resolved."""

    error_code = ErrorCode.REPOSITORY_NOT_CONFIGURED


class AccessorNotFoundError(GridSourceError):
    """A reflected field has no readable accessor on the record."""

    error_code = ErrorCode.ACCESSOR_NOT_FOUND
