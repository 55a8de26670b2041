"""
Custom exceptions for the my-todo application.

Two families:
- TodoAppError: raised by the REST API side (services, repositories) and
  rendered by the global exception handler with its own status code
- ApiClientError: raised by the API Client when a call to the REST API
  fails (transport, status or payload)
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes for API responses.

    Naming convention: <DOMAIN>_<NUMBER>
    - TODO_xxx: Todo errors
    - LABEL_xxx: Label errors
    - API_xxx: API Client errors
    """

    # Todo errors
    TODO_NOT_FOUND = "TODO_001"

    # Label errors
    LABEL_NOT_FOUND = "LABEL_001"
    DUPLICATE_LABEL = "LABEL_002"

    # API Client errors
    EXTERNAL_API_ERROR = "API_001"
    INVALID_RESPONSE = "API_004"
    CONNECTION_ERROR = "API_005"

    # Generic
    DATABASE_ERROR = "DB_001"


class TodoAppError(Exception):
    """
    Base exception for errors raised while serving the REST API.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status code returned to the caller
        error_code: Machine-readable error identifier
        details: Additional context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        details: Any = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"


class NotFoundError(TodoAppError):
    """
    Raised when a todo or label id does not exist.

    HTTP Status: 404 Not Found
    """

    def __init__(
        self,
        message: str = "Not Found",
        error_code: ErrorCode = ErrorCode.TODO_NOT_FOUND,
        details: Any = None,
    ):
        super().__init__(
            message=message,
            status_code=404,
            error_code=error_code,
            details=details,
        )


class DuplicateLabelError(TodoAppError):
    """
    Raised when a label with the same name already exists.

    `details` carries the id of the existing label.

    HTTP Status: 409 Conflict
    """

    def __init__(self, name: str, existing_id: int):
        super().__init__(
            message=f"Label '{name}' already exists",
            status_code=409,
            error_code=ErrorCode.DUPLICATE_LABEL,
            details={"id": existing_id},
        )


class ApiClientError(Exception):
    """
    Raised by TodoApiClient when a REST API call fails.

    Not retryable: the client issues exactly one request per call and
    leaves recovery to the caller.

    Attributes:
        message: Error description
        error_code: CONNECTION_ERROR, EXTERNAL_API_ERROR or INVALID_RESPONSE
        status_code: HTTP status of the failed response, if one arrived
        details: Additional context (endpoint, truncated body)
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.EXTERNAL_API_ERROR,
        status_code: int | None = None,
        details: Any = None,
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
            "details": self.details,
        }
