"""Standardized JSON API responses for FastAPI/Starlette applications."""

import logging

from api_response.core.common.exceptions import (
    ApiResponseError,
    ConfigurationError,
    ResponseEncodingError,
)
from api_response.core.config.app_config import AppConfig, ResponseConfig, load_config
from api_response.core.domain.headers import normalize_headers
from api_response.core.domain.responses import ResponseEnvelope, ResponseStatus
from api_response.core.interfaces.response_factory_interface import IResponseFactory
from api_response.core.services.response_formatter import (
    ApiResponseMixin,
    ResponseFormatter,
)
from api_response.core.services.response_formatter_factory import (
    build_response_factory,
    build_response_formatter,
    get_default_formatter,
    reset_default_formatter,
    set_default_formatter,
)
from api_response.core.transport.fastapi import (
    EncodedJsonResponseFactory,
    FastAPIJsonResponseFactory,
    get_response_formatter,
    install_response_formatter,
)
from api_response.facade import fail_response, success_response

# Silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "ApiResponseError",
    "ApiResponseMixin",
    "AppConfig",
    "ConfigurationError",
    "EncodedJsonResponseFactory",
    "FastAPIJsonResponseFactory",
    "IResponseFactory",
    "ResponseConfig",
    "ResponseEncodingError",
    "ResponseEnvelope",
    "ResponseFormatter",
    "ResponseStatus",
    "build_response_factory",
    "build_response_formatter",
    "fail_response",
    "get_default_formatter",
    "get_response_formatter",
    "install_response_formatter",
    "load_config",
    "normalize_headers",
    "reset_default_formatter",
    "set_default_formatter",
    "success_response",
]
