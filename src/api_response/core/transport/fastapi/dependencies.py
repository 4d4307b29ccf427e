"""
FastAPI integration for the response formatter.

``install_response_formatter`` registers a formatter on an application and
``get_response_formatter`` hands it to route handlers through ``Depends``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request

from api_response.core.common.logging_utils import get_logger
from api_response.core.services.response_formatter import ResponseFormatter

logger = get_logger(__name__)

APP_STATE_ATTRIBUTE = "response_formatter"


def install_response_formatter(
    app: FastAPI, formatter: ResponseFormatter | None = None
) -> ResponseFormatter:
    """Register a response formatter on a FastAPI application.

    Args:
        app: The application to register the formatter on
        formatter: The formatter to register; built from configuration when
            omitted

    Returns:
        The registered formatter
    """
    if formatter is None:
        from api_response.core.services.response_formatter_factory import (
            build_response_formatter,
        )

        formatter = build_response_formatter()
    setattr(app.state, APP_STATE_ATTRIBUTE, formatter)
    logger.debug(
        "Installed response formatter",
        response_factory=type(formatter.response_factory).__name__,
    )
    return formatter


def get_response_formatter(request: Request) -> ResponseFormatter:
    """FastAPI dependency returning the application's response formatter.

    Falls back to the process-wide default formatter when none was installed.
    """
    formatter = getattr(request.app.state, APP_STATE_ATTRIBUTE, None)
    if isinstance(formatter, ResponseFormatter):
        return formatter

    from api_response.core.services.response_formatter_factory import (
        get_default_formatter,
    )

    return get_default_formatter()
