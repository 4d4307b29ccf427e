"""
Module-level response helpers.

These functions delegate to the process-wide default formatter, so callers
can build responses without holding a formatter instance.
"""

from __future__ import annotations

from typing import Any

from api_response.core.services.response_formatter import _MISSING, HeaderInput
from api_response.core.services.response_formatter_factory import (
    get_default_formatter,
)


def success_response(
    data: Any = _MISSING,
    message: str = "",
    status_code: int | None = None,
    headers: HeaderInput = None,
) -> Any:
    """Return a standardized success response from the default formatter."""
    return get_default_formatter().success(data, message, status_code, headers)


def fail_response(
    message: str = "",
    status_code: int | None = None,
    headers: HeaderInput = None,
) -> Any:
    """Return a standardized error response from the default formatter."""
    return get_default_formatter().fail(message, status_code, headers)
