"""Reply normalization.

The external endpoint has answered in several shapes over time, and the relay
adds one of its own. This module hides which shapes are recognized and turns
any of them into the single string shown to the user:

- plain text                                   -> the text itself
- {"response": {"response": "..."}}            -> the nested string
- {"response": "..."}                          -> the string (relay shape)
- [{"response": {"response": "..."}}, ...]     -> fragments joined by one space
- [{"response": "..."}, ...]                   -> fragments joined by one space
- "..." (a bare JSON string)                   -> the decoded string
"""

import json
from typing import Any

from ..endpoint.models import is_json_content_type

NO_RESPONSE_TEXT = "No response received."


class ResponseShapeError(ValueError):
    """Raised when a reply body matches none of the recognized shapes."""


def _or_fallback(text: str) -> str:
    return text if text.strip() else NO_RESPONSE_TEXT


def _nested_response(item: Any) -> str | None:
    """Extract ``item["response"]["response"]`` when it is a string."""
    if not isinstance(item, dict):
        return None
    inner = item.get("response")
    if not isinstance(inner, dict):
        return None
    value = inner.get("response")
    return value if isinstance(value, str) else None


def _fragment(item: Any) -> str | None:
    """Text carried by one array element, nested or flat."""
    nested = _nested_response(item)
    if nested is not None:
        return nested
    if isinstance(item, dict) and isinstance(item.get("response"), str):
        return item["response"]
    return None


def _array_fragments(data: list) -> list[str]:
    return [fragment for fragment in map(_fragment, data) if fragment]


def _normalize_object(data: dict) -> str:
    if "response" not in data:
        raise ResponseShapeError(
            f"JSON object has no 'response' field (keys: {sorted(data)[:5]})"
        )

    response = data["response"]
    if response is None:
        return NO_RESPONSE_TEXT
    if isinstance(response, str):
        return _or_fallback(response)
    if isinstance(response, dict):
        nested = _nested_response(data)
        if nested is None:
            if response.get("response") is None:
                return NO_RESPONSE_TEXT
            raise ResponseShapeError("'response.response' is not a string")
        return _or_fallback(nested)

    raise ResponseShapeError(
        f"'response' field has unsupported type {type(response).__name__}"
    )


def _normalize_array(data: list) -> str:
    fragments = _array_fragments(data)
    return _or_fallback(" ".join(fragments))


def normalize_data(data: Any) -> str:
    """Normalize an already-decoded JSON value into a display string.

    Raises:
        ResponseShapeError: If the value matches no recognized shape
    """
    if data is None:
        return NO_RESPONSE_TEXT
    if isinstance(data, str):
        return _or_fallback(data)
    if isinstance(data, list):
        return _normalize_array(data)
    if isinstance(data, dict):
        return _normalize_object(data)

    raise ResponseShapeError(f"Unsupported JSON value of type {type(data).__name__}")


def normalize_reply(body: str, content_type: str | None = None) -> str:
    """Convert a raw reply body into one display string.

    Bodies declared as JSON must parse and match a recognized shape. Other
    bodies are only treated as JSON when they look like an object or array
    carrying a recognized shape; anything else is plain text.

    Args:
        body: Decoded response body
        content_type: Content-Type header of the reply, if known

    Returns:
        The display string, or "No response received." when nothing usable
        was found

    Raises:
        ResponseShapeError: If the body is malformed JSON (declared as JSON)
            or decodes to an unrecognized structure
    """
    stripped = body.strip()
    if not stripped:
        return NO_RESPONSE_TEXT

    declared_json = is_json_content_type(content_type)
    if not declared_json and stripped[0] not in "[{":
        return body

    try:
        data = json.loads(stripped)
    except json.JSONDecodeError as e:
        if declared_json:
            raise ResponseShapeError(f"Malformed JSON body: {e}") from e
        return body

    if declared_json:
        return normalize_data(data)

    # Undeclared bodies that merely look like JSON are plain text
    if isinstance(data, list) and not _array_fragments(data):
        return body
    try:
        return normalize_data(data)
    except ResponseShapeError:
        return body
