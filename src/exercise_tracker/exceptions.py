"""
Custom exceptions for the Exercise Tracker service.

This module defines a hierarchy of exceptions that provide clear error
handling throughout the application. Each exception includes:
- A descriptive message
- An error code for logs and debugging
- HTTP status code mapping
- Optional details for debugging

The wire format stays a flat ``{"error": message}`` body; codes and
details are kept on the exception for logging only.
"""

from typing import Any, Dict, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for consistent error reporting."""

    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"

    # User errors
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # Store errors
    STORE_ERROR = "STORE_ERROR"
    DUPLICATE_KEY = "DUPLICATE_KEY"


class ExerciseTrackerError(Exception):
    """
    Base exception for all Exercise Tracker errors.

    Attributes:
        message: Human-readable error message
        code: Error code from ErrorCode enum
        status_code: HTTP status code for API responses
        details: Optional dictionary with additional error details
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for API response."""
        return {"error": self.message}

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


# ============================================================================
# Validation Errors (400)
# ============================================================================

class ValidationError(ExerciseTrackerError):
    """Raised when a required field is missing or the request body is unreadable."""

    def __init__(
        self,
        message: str,
        fields: Optional[list[str]] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if fields:
            error_details["fields"] = fields
        super().__init__(
            message=message,
            code=ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=error_details,
        )


# ============================================================================
# Not Found Errors (404)
# ============================================================================

class NotFoundError(ExerciseTrackerError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        message: str,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        error_details["resource_type"] = resource_type
        error_details["resource_id"] = resource_id
        super().__init__(
            message=message,
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details=error_details,
        )


class UserNotFoundError(NotFoundError):
    """Raised when a user identifier does not resolve to a user."""

    def __init__(self, user_id: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            message="user not found",
            resource_type="User",
            resource_id=user_id,
            details=details,
        )
        self.code = ErrorCode.USER_NOT_FOUND


# ============================================================================
# Store Errors (500)
# ============================================================================

class StoreError(ExerciseTrackerError):
    """Raised when a persistence operation fails.

    The message is the underlying driver message, unmodified.
    """

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        error_details = details or {}
        if operation:
            error_details["operation"] = operation
        super().__init__(
            message=message,
            code=ErrorCode.STORE_ERROR,
            status_code=500,
            details=error_details,
        )


class DuplicateKeyError(StoreError):
    """Raised when a write violates a unique constraint."""

    def __init__(
        self,
        message: str,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, operation=operation, details=details)
        self.code = ErrorCode.DUPLICATE_KEY
