"""
Helpers for encoding request bodies and query strings sent to the API.
"""

from __future__ import annotations

import json
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import urlencode

from .errors import SerializationError

__all__ = [
    "build_query_string",
    "encode_body",
]


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _flatten(prefix: str, value: Any, pairs: List[Tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, Mapping):
        for key, item in value.items():
            _flatten(f"{prefix}[{key}]", item, pairs)
        return
    if isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            _flatten(f"{prefix}[{index}]", item, pairs)
        return
    pairs.append((prefix, _stringify(value)))


def build_query_string(filters: Optional[Mapping[str, Any]]) -> str:
    """
    Encode ``filters`` as a query string including the leading ``?``.

    An empty mapping produces an empty string. ``None`` values are left out,
    nested mappings and sequences are flattened into bracketed keys.
    """
    if not filters:
        return ""

    pairs: List[Tuple[str, str]] = []
    for key, value in filters.items():
        _flatten(str(key), value, pairs)

    if not pairs:
        return ""
    return "?" + urlencode(pairs)


def encode_body(body: Any) -> Optional[str]:
    """Serialize a request body to JSON, or return ``None`` when there is none."""
    if body is None:
        return None
    try:
        return json.dumps(body)
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Error encoding parameters into JSON: '{exc}'."
        ) from exc
