"""
Common exception classes for the API response helpers.

This module defines the exception hierarchy used by the package. Encoding
errors never escape the response factories; configuration errors are raised
to the caller that loads the configuration.
"""

from __future__ import annotations


class ApiResponseError(Exception):
    """Base exception class for all API response errors."""

    def __init__(
        self,
        message: str,
        details: dict | None = None,
        *,
        status_code: int | None = None,
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error details
            status_code: Optional HTTP status code hint for transport adapters
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.status_code = status_code or 500


class ResponseEncodingError(ApiResponseError):
    """Raised when a response payload cannot be serialized to JSON."""

    def __init__(
        self,
        message: str = "Failed to encode response payload",
        details: dict | None = None,
    ):
        super().__init__(message, details, status_code=500)


class ConfigurationError(ApiResponseError):
    """Raised when there's a configuration issue."""

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict | None = None,
    ):
        super().__init__(message, details, status_code=400)
