"""
HTTP transport that executes endpoint calls against the API.
"""

from __future__ import annotations

import json
import logging
import platform
from typing import Any, Dict, Optional, Protocol

import requests

from .config import ClientConfig
from .errors import TransportError

__all__ = [
    "HttpTransport",
    "Transport",
]

CLIENT_VERSION = "0.1.0"
HTTP_NO_CONTENT = 204


class Transport(Protocol):
    def perform_http_call(
        self, method: str, path: str, body: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        ...


def _user_agent() -> str:
    return " ".join(
        [
            f"payrest/{CLIENT_VERSION}",
            f"Python/{platform.python_version()}",
            f"requests/{requests.__version__}",
        ]
    )


class HttpTransport:
    """
    Sends requests relative to ``{api_endpoint}/{api_version}`` and decodes
    the JSON responses.

    ``None`` is returned for responses without content. Network failures,
    undecodable responses and error statuses raise :class:`TransportError`.
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self.session = session or requests.Session()

    def _headers(self, has_body: bool) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Authorization": f"Bearer {self.config.api_key}",
            "User-Agent": _user_agent(),
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def perform_http_call(
        self, method: str, path: str, body: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        url = f"{self.config.base_url}/{path}"
        logging.debug("Performing %s %s", method, url)

        try:
            response = self.session.request(
                method,
                url,
                headers=self._headers(body is not None),
                data=body,
                timeout=self.config.timeout_seconds,
            )
        except requests.RequestException as exc:
            logging.warning("%s %s failed: %s", method, url, exc)
            raise TransportError(f"Error executing API call: {exc}") from exc

        if response.status_code == HTTP_NO_CONTENT or not response.content:
            if response.status_code >= 400:
                raise TransportError(
                    f"Error executing API call ({response.status_code}): empty response",
                    status_code=response.status_code,
                )
            return None

        try:
            payload = response.json()
        except (json.JSONDecodeError, ValueError) as exc:
            raise TransportError(
                f"Unable to decode API response from {url}: {response.text}",
                status_code=response.status_code,
            ) from exc

        if response.status_code >= 400:
            logging.warning(
                "%s %s responded with %s", method, url, response.status_code
            )
            document = payload if isinstance(payload, dict) else {"detail": payload}
            raise TransportError.from_error_document(response.status_code, document)

        return payload
