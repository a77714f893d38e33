"""Base exception hierarchy shared by every layer of the provider."""

from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all provider errors.

    Carries a stable ``error_code`` and a ``details`` dictionary so callers can
    render the failure without parsing the message.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        """
        Initialize the exception.

        Args:
            message: Human readable description of the failure
            error_code: Stable identifier, defaults to the class name
            details: Additional structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when input data fails validation."""


class ConfigurationError(DomainException):
    """Raised when required configuration is missing or invalid."""


class InfrastructureError(DomainException):
    """Base class for failures talking to external systems."""


class TransportError(InfrastructureError):
    """Raised when a request never produced an HTTP response."""

    def __init__(self, message: str, method: str, url: str) -> None:
        super().__init__(message, details={"method": method, "url": url})
        self.method = method
        self.url = url


class ApiStatusError(InfrastructureError):
    """Raised when the API answers with a non-2xx status code."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"status: {status_code}, body: {body}",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class ResponseDecodeError(InfrastructureError):
    """Raised when a response body cannot be decoded into the expected envelope."""
