"""Domain types for response shaping."""

from api_response.core.domain.headers import has_header, normalize_headers
from api_response.core.domain.responses import ResponseEnvelope, ResponseStatus

__all__ = [
    "ResponseEnvelope",
    "ResponseStatus",
    "has_header",
    "normalize_headers",
]
