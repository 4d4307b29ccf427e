"""
Composition of response formatters.

Selects the response factory from configuration and keeps the process-wide
default formatter used by the module-level helpers.
"""

from __future__ import annotations

import threading

from api_response.core.config.app_config import AppConfig, ResponseConfig, load_config
from api_response.core.interfaces.response_factory_interface import IResponseFactory
from api_response.core.services.response_formatter import ResponseFormatter
from api_response.core.transport.fastapi.response_factories import (
    EncodedJsonResponseFactory,
    FastAPIJsonResponseFactory,
)

_default_formatter: ResponseFormatter | None = None
_default_lock = threading.Lock()


def build_response_factory(config: ResponseConfig) -> IResponseFactory:
    """Create the response factory selected by the configuration."""
    if config.prefer_framework_json:
        return FastAPIJsonResponseFactory(
            pretty=config.pretty_print,
            failure_message=config.encoding_failure_message,
        )
    return EncodedJsonResponseFactory(
        pretty=config.pretty_print,
        failure_message=config.encoding_failure_message,
    )


def build_response_formatter(config: AppConfig | None = None) -> ResponseFormatter:
    """Create a formatter wired with the configured response factory.

    Args:
        config: Application configuration; loaded from the environment when
            omitted

    Returns:
        A ready to use ResponseFormatter
    """
    if config is None:
        config = load_config()
    return ResponseFormatter(build_response_factory(config.response), config.response)


def get_default_formatter() -> ResponseFormatter:
    """Return the process-wide default formatter, building it on first use."""
    global _default_formatter
    if _default_formatter is None:
        with _default_lock:
            if _default_formatter is None:
                _default_formatter = build_response_formatter()
    return _default_formatter


def set_default_formatter(formatter: ResponseFormatter) -> None:
    global _default_formatter
    with _default_lock:
        _default_formatter = formatter


def reset_default_formatter() -> None:
    """Drop the default formatter so the next use rebuilds it."""
    global _default_formatter
    with _default_lock:
        _default_formatter = None
