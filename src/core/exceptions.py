"""
Custom exceptions for the morTodo service and client.

This module defines a small exception hierarchy with:
- Machine-readable error codes for logging
- The raw error message that is exposed to API clients
- Structured error data for logging and debugging

Design pattern: Base exception → Specific exceptions
- StorageError: any failed storage operation on the server side
- TodoClientError: any failed HTTP call made by the client
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """
    Standardized error codes used in structured logs.

    Naming convention: <DOMAIN>_<NUMBER>
    - STORE_xxx: Storage collaborator failures
    - API_xxx: Request handling failures
    - CLIENT_xxx: Client-side HTTP failures
    """

    # Storage errors
    STORAGE_FAILED = "STORE_001"

    # Request errors
    INVALID_REQUEST = "API_001"
    INTERNAL_ERROR = "API_002"

    # Client errors
    CONNECTION_ERROR = "CLIENT_001"
    UNEXPECTED_STATUS = "CLIENT_002"
    INVALID_RESPONSE = "CLIENT_003"


class StorageError(Exception):
    """
    Raised when a storage operation fails.

    This is the only error kind the API surfaces. The handler in
    ``src.main`` turns it into ``500 {"error": <message>}``, exposing the
    raw message of the underlying failure.

    Attributes:
        message: Raw error description from the failing operation
        operation: Name of the service operation that failed
        error_code: Machine-readable error identifier
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        error_code: ErrorCode = ErrorCode.STORAGE_FAILED,
    ):
        self.message = message
        self.operation = operation
        self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for API responses.

        Returns:
            dict: ``{"error": message}``, the wire format of every error path
        """
        return {"error": self.message}

    def __str__(self) -> str:
        """String representation for logging."""
        return f"{self.error_code.value}: {self.message}"


class TodoClientError(Exception):
    """
    Raised by the HTTP client when a call to the todo API fails.

    Covers transport failures (connection refused, timeouts) and non-2xx
    responses. ``status_code`` is None for transport failures.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        error_code: ErrorCode = ErrorCode.CONNECTION_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for structured logs."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "status_code": self.status_code,
        }
