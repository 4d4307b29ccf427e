"""JSON encoding for response bodies."""

from __future__ import annotations

import json
from typing import Any

from api_response.core.common.exceptions import ResponseEncodingError


def encode_json(payload: Any, *, indent: int | None = None) -> str:
    """Encode a payload to a compact JSON string.

    Unicode characters and forward slashes are left unescaped. Values that
    have no JSON representation (NaN, Infinity, arbitrary objects, circular
    structures) raise instead of being replaced.

    Args:
        payload: The value to encode
        indent: Optional indentation for pretty-printed output

    Returns:
        The JSON document as a string

    Raises:
        ResponseEncodingError: If the payload cannot be encoded
    """
    separators = (",", ":") if indent is None else (",", ": ")
    try:
        text = json.dumps(
            payload,
            ensure_ascii=False,
            allow_nan=False,
            indent=indent,
            separators=separators,
        )
        # Lone surrogates survive dumps but cannot be sent as UTF-8
        text.encode("utf-8")
    except (TypeError, ValueError, RecursionError) as exc:
        raise ResponseEncodingError(
            details={"error": str(exc), "error_type": type(exc).__name__}
        ) from exc
    return text
