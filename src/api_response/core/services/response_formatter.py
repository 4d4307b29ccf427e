"""
Response formatter service.

Shapes success and error payloads, normalizes headers and delegates the
construction of the framework response to an ``IResponseFactory``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from api_response.core.config.app_config import ResponseConfig
from api_response.core.constants import FIELD_DATA, FIELD_MESSAGE, FIELD_STATUS
from api_response.core.domain.headers import normalize_headers
from api_response.core.domain.responses import ResponseEnvelope, ResponseStatus
from api_response.core.interfaces.response_factory_interface import IResponseFactory

HeaderInput = Mapping[Any, Any] | None

_MISSING: Any = object()


class ResponseFormatter:
    """Builds standardized JSON API responses.

    Success payloads look like ``{"status": "success", "message": ...,
    "data": ...}`` and error payloads like ``{"status": "error", "message":
    ...}``. Subclasses may override ``format_success_payload`` and
    ``format_error_payload`` to change the structure.
    """

    def __init__(
        self,
        response_factory: IResponseFactory,
        config: ResponseConfig | None = None,
    ) -> None:
        """Initialize the formatter.

        Args:
            response_factory: Factory that builds the framework response
            config: Response defaults; ``ResponseConfig()`` when omitted
        """
        self._response_factory = response_factory
        self._config = config or ResponseConfig()

    @property
    def response_factory(self) -> IResponseFactory:
        return self._response_factory

    @property
    def config(self) -> ResponseConfig:
        return self._config

    def success(
        self,
        data: Any = _MISSING,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> Any:
        """Return a standardized success response.

        Args:
            data: The response payload; an empty mapping when omitted
            message: Optional human-readable message
            status_code: HTTP status code; the configured success default
                when omitted
            headers: Additional HTTP headers to send

        Returns:
            The response built by the response factory
        """
        return self.create_response(
            self.success_envelope(data, message, status_code, headers)
        )

    def fail(
        self,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> Any:
        """Return a standardized error response.

        Args:
            message: Human-readable error message
            status_code: HTTP status code; the configured error default
                when omitted
            headers: Additional HTTP headers to send

        Returns:
            The response built by the response factory
        """
        return self.create_response(self.fail_envelope(message, status_code, headers))

    def success_envelope(
        self,
        data: Any = _MISSING,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> ResponseEnvelope:
        """Shape a success response without building a framework response."""
        if data is _MISSING:
            data = {}
        if status_code is None:
            status_code = self._config.success_status_code
        return ResponseEnvelope(
            content=self.format_success_payload(data, message),
            status_code=status_code,
            headers=self.normalize_headers(headers),
            media_type=self._config.default_content_type,
        )

    def fail_envelope(
        self,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> ResponseEnvelope:
        """Shape an error response without building a framework response."""
        if status_code is None:
            status_code = self._config.error_status_code
        return ResponseEnvelope(
            content=self.format_error_payload(message),
            status_code=status_code,
            headers=self.normalize_headers(headers),
            media_type=self._config.default_content_type,
        )

    def format_success_payload(self, data: Any, message: str) -> dict[str, Any]:
        return {
            FIELD_STATUS: ResponseStatus.SUCCESS.value,
            FIELD_MESSAGE: message,
            FIELD_DATA: data,
        }

    def format_error_payload(self, message: str) -> dict[str, Any]:
        return {
            FIELD_STATUS: ResponseStatus.ERROR.value,
            FIELD_MESSAGE: message,
        }

    def normalize_headers(self, headers: HeaderInput) -> dict[str, str]:
        return normalize_headers(headers, self._config.default_content_type)

    def create_response(self, envelope: ResponseEnvelope) -> Any:
        return self._response_factory.create_response(envelope)


class ApiResponseMixin:
    """Adds ``success_response`` and ``fail_response`` to a host class.

    The host may set ``response_formatter``; otherwise the process-wide
    default formatter is used.
    """

    response_formatter: ResponseFormatter | None = None

    def _get_response_formatter(self) -> ResponseFormatter:
        if self.response_formatter is not None:
            return self.response_formatter
        from api_response.core.services.response_formatter_factory import (
            get_default_formatter,
        )

        return get_default_formatter()

    def success_response(
        self,
        data: Any = _MISSING,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> Any:
        return self._get_response_formatter().success(
            data, message, status_code, headers
        )

    def fail_response(
        self,
        message: str = "",
        status_code: int | None = None,
        headers: HeaderInput = None,
    ) -> Any:
        return self._get_response_formatter().fail(message, status_code, headers)
