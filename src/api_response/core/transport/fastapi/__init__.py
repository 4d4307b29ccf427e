"""FastAPI/Starlette adapters for the response helpers."""

from api_response.core.transport.fastapi.dependencies import (
    get_response_formatter,
    install_response_formatter,
)
from api_response.core.transport.fastapi.response_factories import (
    EncodedJsonResponseFactory,
    FastAPIJsonResponseFactory,
    PrettyJSONResponse,
)

__all__ = [
    "EncodedJsonResponseFactory",
    "FastAPIJsonResponseFactory",
    "PrettyJSONResponse",
    "get_response_formatter",
    "install_response_formatter",
]
