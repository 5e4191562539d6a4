"""
Public, high-level helpers for building an API client.
"""

from __future__ import annotations

from typing import Mapping, Optional

import requests

from .core.client import ApiClient
from .core.config import ClientConfig, ClientParameters, load_client_config
from .core.transport import Transport

__all__ = [
    "create_api_client",
]


def create_api_client(
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    transport: Optional[Transport] = None,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_endpoint: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> ApiClient:
    """
    Construct an :class:`ApiClient`.

    Callers can either supply a ready-made :class:`ClientConfig` or let the
    helper assemble one from environment data and keyword arguments.
    """
    if config is not None:
        extras = (
            overrides,
            base,
            parameters,
            api_key,
            api_endpoint,
            api_version,
            timeout_seconds,
        )
        if any(item is not None and item != {} for item in extras):
            raise ValueError(
                "Provide either a pre-built ClientConfig or individual parameters, not both."
            )
        cfg = config
    else:
        cfg = load_client_config(
            env_file=env_file,
            overrides=overrides,
            base=base,
            parameters=parameters,
            api_key=api_key,
            api_endpoint=api_endpoint,
            api_version=api_version,
            timeout_seconds=timeout_seconds,
        )
    return ApiClient(cfg, session=session, transport=transport)
