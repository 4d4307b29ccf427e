from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from api_response.core.constants import (
    CONTENT_TYPE_JSON,
    FIELD_MESSAGE,
    FIELD_STATUS,
    HTTP_200_OK,
    STATUS_ERROR,
    STATUS_SUCCESS,
)
from api_response.core.interfaces.model_bases import InternalDTO


class ResponseStatus(str, Enum):
    """Status label carried in every response payload."""

    SUCCESS = STATUS_SUCCESS
    ERROR = STATUS_ERROR


@dataclass
class ResponseEnvelope(InternalDTO):
    """Transport-agnostic response container.

    Carries the normalized (content, status code, headers) triple from the
    formatter to a response factory, which maps it onto a framework response.
    """

    content: Any  # Payload mapping, or an already encoded JSON string
    status_code: int = HTTP_200_OK
    headers: dict[str, str] = field(default_factory=dict)
    media_type: str = CONTENT_TYPE_JSON

    @property
    def status(self) -> ResponseStatus | None:
        """Status label of the payload, if the content is a payload mapping."""
        if isinstance(self.content, dict):
            value = self.content.get(FIELD_STATUS)
            if value in (STATUS_SUCCESS, STATUS_ERROR):
                return ResponseStatus(value)
        return None


def encoding_failure_payload(message: str) -> dict[str, str]:
    """Build the minimal error payload sent when encoding fails."""
    return {FIELD_STATUS: ResponseStatus.ERROR.value, FIELD_MESSAGE: message}
