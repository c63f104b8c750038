"""Custom exception classes for the contact API.

This module provides domain-specific exception classes that carry
appropriate HTTP status codes and structured error information.
"""

from __future__ import annotations

from typing import Any
from typing import Optional


class AppError(Exception):
    """Base exception for application errors.

    All application-specific exceptions should inherit from this class.
    Each exception carries an HTTP status code and optional details.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code (default 500).
        detail: Optional additional context, never sent to the caller.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        detail: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response body."""
        return {"ok": False, "message": self.message}


class ValidationError(AppError):
    """Raised when input validation fails.

    Use for missing bodies, malformed JSON, or schema violations
    in the submitted contact form.
    """

    def __init__(self, message: str):
        super().__init__(message, status_code=400)


class MethodNotAllowedError(AppError):
    """Raised when the request uses an unsupported HTTP method."""

    def __init__(self, method: str = ""):
        super().__init__(
            "Method Not Allowed",
            status_code=405,
            detail=f"Method: {method}" if method else None,
        )
        self.method = method


class DeliveryError(AppError):
    """Raised when the mail transport fails to hand off a message.

    The detail carries the transport's own error description and is
    only ever logged.
    """

    def __init__(
        self,
        message: str = "Mail send failed",
        detail: Optional[str] = None,
    ):
        super().__init__(message, status_code=500, detail=detail)


class ConfigurationError(AppError):
    """Raised when required configuration is missing.

    Use when environment variables or settings are not properly configured.
    """

    def __init__(self, config_name: str):
        super().__init__(
            f"Missing required configuration: {config_name}",
            status_code=500,
        )
        self.config_name = config_name
