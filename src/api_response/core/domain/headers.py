"""
Header normalization for JSON responses.

Header sets are plain ``dict[str, str]`` mappings once normalized: every key
and value is a string, multi-valued entries are joined into a single value
and exactly one ``Content-Type`` entry (any casing) is present.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from api_response.core.constants import (
    CONTENT_TYPE_JSON,
    HEADER_CONTENT_TYPE,
    HEADER_VALUE_SEPARATOR,
)


# Control characters (CR and LF included) would split or corrupt a header line
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0a-\x1f\x7f]+")


def _to_header_text(text: str) -> str:
    """Return ``text`` as a single line that encodes to latin-1."""
    text = text.encode("latin-1", "replace").decode("latin-1")
    return _CONTROL_CHARS.sub(" ", text)


def _stringify_header_value(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bytes | bytearray):
        # HTTP header octets are latin-1
        return bytes(value).decode("latin-1")
    if isinstance(value, list | tuple):
        return HEADER_VALUE_SEPARATOR.join(_stringify_header_value(v) for v in value)
    return str(value)


def _coerce_header_value(value: Any) -> str:
    return _to_header_text(_stringify_header_value(value))


def has_header(headers: Mapping[str, Any], name: str) -> bool:
    """Return True if ``headers`` has an entry named ``name`` in any casing."""
    wanted = name.lower()
    return any(str(key).lower() == wanted for key in headers)


def normalize_headers(
    headers: Mapping[Any, Any] | None,
    default_content_type: str = CONTENT_TYPE_JSON,
) -> dict[str, str]:
    """Normalize a caller-supplied header mapping.

    Args:
        headers: Header mapping; values may be strings, sequences of strings
            or arbitrary objects
        default_content_type: Value injected as ``Content-Type`` when the
            caller did not supply one

    Returns:
        A new mapping with string keys and values, preserving the input order
        and guaranteeing a content type entry
    """
    normalized: dict[str, str] = {}
    if headers:
        for key, value in headers.items():
            name = _to_header_text(str(key))
            # Only the first content type survives when several casings are given
            if name.lower() == HEADER_CONTENT_TYPE.lower() and has_header(
                normalized, HEADER_CONTENT_TYPE
            ):
                continue
            normalized[name] = _coerce_header_value(value)

    if not has_header(normalized, HEADER_CONTENT_TYPE):
        normalized[HEADER_CONTENT_TYPE] = _to_header_text(default_content_type)

    return normalized
