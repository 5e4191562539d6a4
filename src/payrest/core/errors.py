"""
Exception hierarchy shared by the payrest client.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__ = [
    "ApiError",
    "ConfigError",
    "InvalidArgumentError",
    "SerializationError",
    "StructuralError",
    "TransportError",
]


class ApiError(Exception):
    """Base class for every error raised by payrest."""


class ConfigError(ApiError):
    """Raised when the client or an endpoint is configured incorrectly."""


class InvalidArgumentError(ApiError, ValueError):
    """Raised before any network call when a required argument is missing."""


class SerializationError(ApiError):
    """Raised when a request body cannot be encoded to JSON."""


class StructuralError(ApiError):
    """Raised when a response does not have the shape the endpoint expects."""


class TransportError(ApiError):
    """
    Raised by the transport for network failures and non-success responses.

    When the API returned an error document its fields are exposed as
    attributes; ``raw`` holds the decoded document itself.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        title: Optional[str] = None,
        detail: Optional[str] = None,
        field: Optional[str] = None,
        documentation_url: Optional[str] = None,
        raw: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.field = field
        self.documentation_url = documentation_url
        self.raw = raw

    @classmethod
    def from_error_document(
        cls, status_code: int, document: Dict[str, Any]
    ) -> "TransportError":
        title = document.get("title")
        detail = document.get("detail")
        field = document.get("field")

        documentation_url = None
        links = document.get("_links") or {}
        documentation = links.get("documentation") if isinstance(links, dict) else None
        if isinstance(documentation, dict):
            documentation_url = documentation.get("href")

        message = f"Error executing API call ({status_code}: {title}): {detail}"
        if field:
            message += f". Field: {field}"
        if documentation_url:
            message += f". Documentation: {documentation_url}"

        return cls(
            message,
            status_code=status_code,
            title=title,
            detail=detail,
            field=field,
            documentation_url=documentation_url,
            raw=document,
        )
