"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.
Every command catches ApplicationError at its boundary and renders it
to the console.
"""

from typing import Any


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationError(ApplicationError):
    """Raised when a command argument fails local validation."""

    def __init__(self, message: str = "Validation failed", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_VALIDATION_ERROR")


class AuthenticationError(ApplicationError):
    """Raised when a command needs a logged-in session and none is stored."""

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(message, code="AUTH_UNAUTHORIZED")


class AuthorizationError(ApplicationError):
    """Raised when the stored session lacks the required role."""

    def __init__(self, message: str = "Permission denied") -> None:
        super().__init__(message, code="AUTHZ_FORBIDDEN")


class ExternalServiceError(ApplicationError):
    """Raised when a call to the booking service fails."""

    def __init__(self, message: str = "External service error", code: str = "SYS_EXTERNAL_SERVICE_ERROR") -> None:
        super().__init__(message, code=code)


class ServiceResponseError(ExternalServiceError):
    """
    The booking service answered with an error status.

    Carries the decoded response body so it can be shown verbatim.
    """

    def __init__(self, payload: Any, status_code: int) -> None:
        self.payload = payload
        self.status_code = status_code
        super().__init__(f"Service responded with status {status_code}", code="SYS_SERVICE_RESPONSE_ERROR")


class TransportError(ExternalServiceError):
    """No response was received from the booking service."""

    def __init__(self, message: str = "Request failed") -> None:
        super().__init__(message, code="SYS_TRANSPORT_ERROR")


class StorageError(ApplicationError):
    """Raised when a local state file cannot be written."""

    def __init__(self, message: str = "Could not write local state") -> None:
        super().__init__(message, code="SYS_STORAGE_ERROR")
