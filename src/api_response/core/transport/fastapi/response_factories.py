"""
FastAPI response factories.

This module contains the two response factories the formatter can be wired
with: one that relies on the framework's ``JSONResponse`` and one that
encodes the body itself and hands it to a plain response constructor.
Both answer unencodable payloads with a minimal error payload and status 500.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from starlette.responses import JSONResponse, Response

from api_response.core.common.exceptions import ResponseEncodingError
from api_response.core.common.json_encoding import encode_json
from api_response.core.common.logging_utils import get_logger
from api_response.core.constants import (
    ENCODING_FAILURE_MESSAGE,
    HTTP_500_INTERNAL_SERVER_ERROR,
)
from api_response.core.domain.responses import (
    ResponseEnvelope,
    encoding_failure_payload,
)
from api_response.core.interfaces.response_factory_interface import IResponseFactory

logger = get_logger(__name__)

ResponseConstructor = Callable[[Any, int, dict[str, str]], Any]

# Errors json.dumps raises for values without a JSON representation
_ENCODING_ERRORS = (ResponseEncodingError, TypeError, ValueError, RecursionError)

PRETTY_PRINT_INDENT = 2


class PrettyJSONResponse(JSONResponse):
    """JSONResponse variant that renders indented output."""

    def render(self, content: Any) -> bytes:
        return encode_json(content, indent=PRETTY_PRINT_INDENT).encode("utf-8")


def _starlette_response(
    body: Any, status_code: int, headers: dict[str, str]
) -> Response:
    return Response(content=body, status_code=status_code, headers=headers)


class _FallbackMixin:
    """Builds the substitute envelope used when a payload cannot be encoded."""

    failure_message: str

    def _encoding_failure_envelope(
        self, envelope: ResponseEnvelope, error: BaseException
    ) -> ResponseEnvelope:
        logger.warning(
            "Response payload encoding failed",
            original_status_code=envelope.status_code,
            error=str(error),
            error_type=type(error).__name__,
        )
        return ResponseEnvelope(
            content=encoding_failure_payload(self.failure_message),
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            headers=dict(envelope.headers),
            media_type=envelope.media_type,
        )


class FastAPIJsonResponseFactory(_FallbackMixin, IResponseFactory):
    """Builds responses with the framework's JSON response class."""

    def __init__(
        self,
        response_class: type[JSONResponse] = JSONResponse,
        *,
        pretty: bool = False,
        failure_message: str = ENCODING_FAILURE_MESSAGE,
    ) -> None:
        """Initialize the factory.

        Args:
            response_class: JSON response class to instantiate
            pretty: Use indented output; replaces the default response class
            failure_message: Message sent when the payload cannot be encoded
        """
        if pretty and response_class is JSONResponse:
            response_class = PrettyJSONResponse
        self.response_class = response_class
        self.failure_message = failure_message

    def create_response(self, envelope: ResponseEnvelope) -> JSONResponse:
        # Only rendering the body is guarded; headers are applied afterwards
        try:
            response = self._render(envelope)
        except _ENCODING_ERRORS as exc:
            envelope = self._encoding_failure_envelope(envelope, exc)
            response = self._render(envelope)
        # Replaces the content type derived from media_type with the caller's
        response.headers.update(envelope.headers)
        return response

    def _render(self, envelope: ResponseEnvelope) -> JSONResponse:
        return self.response_class(
            content=envelope.content,
            status_code=envelope.status_code,
            media_type=envelope.media_type,
        )


class EncodedJsonResponseFactory(_FallbackMixin, IResponseFactory):
    """Encodes payloads itself and hands the body to a response constructor.

    The constructor is any callable taking ``(body, status_code, headers)``;
    Starlette's plain ``Response`` is used by default.
    """

    def __init__(
        self,
        response_constructor: ResponseConstructor | None = None,
        *,
        pretty: bool = False,
        failure_message: str = ENCODING_FAILURE_MESSAGE,
    ) -> None:
        self.response_constructor = response_constructor or _starlette_response
        self.indent = PRETTY_PRINT_INDENT if pretty else None
        self.failure_message = failure_message

    def create_response(self, envelope: ResponseEnvelope) -> Any:
        body = envelope.content
        status_code = envelope.status_code
        headers = envelope.headers

        if not isinstance(body, str | bytes):
            try:
                body = encode_json(body, indent=self.indent)
            except ResponseEncodingError as exc:
                fallback = self._encoding_failure_envelope(envelope, exc)
                body = encode_json(fallback.content)
                status_code = fallback.status_code
                headers = fallback.headers

        return self.response_constructor(body, status_code, headers)
