"""
Configuration of the API client.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from .environment import build_environment
from .errors import ConfigError

__all__ = [
    "ClientConfig",
    "ClientParameters",
    "ConfigError",
    "DEFAULT_API_ENDPOINT",
    "DEFAULT_API_VERSION",
    "DEFAULT_TIMEOUT_SECONDS",
    "load_client_config",
]

DEFAULT_API_ENDPOINT = "https://api.mollie.com"
DEFAULT_API_VERSION = "v2"
DEFAULT_TIMEOUT_SECONDS = 10

_API_KEY_PATTERN = re.compile(r"^(live|test|access)_\w{30,}$")

_PARAMETER_TO_ENV_KEY = {
    "api_key": "PAYREST_API_KEY",
    "api_endpoint": "PAYREST_API_ENDPOINT",
    "api_version": "PAYREST_API_VERSION",
    "timeout_seconds": "PAYREST_TIMEOUT_SECONDS",
}


@dataclass(frozen=True)
class ClientParameters:
    """
    Explicit parameter bundle for constructing :class:`ClientConfig`.

    Every field left at ``None`` falls back to the environment.
    """

    api_key: Optional[str] = None
    api_endpoint: Optional[str] = None
    api_version: Optional[str] = None
    timeout_seconds: Optional[int | str] = None

    def as_overrides(self) -> Dict[str, str]:
        overrides: Dict[str, str] = {}
        for field_name, env_key in _PARAMETER_TO_ENV_KEY.items():
            value = getattr(self, field_name)
            if value is None:
                continue
            overrides[env_key] = str(value)
        return overrides


def _collect_parameter_overrides(
    parameters: Optional[ClientParameters],
    explicit: Mapping[str, Any],
) -> Dict[str, str]:
    overrides: Dict[str, str] = {}
    if parameters is not None:
        overrides.update(parameters.as_overrides())

    for key, value in explicit.items():
        if value is None:
            continue
        try:
            env_key = _PARAMETER_TO_ENV_KEY[key]
        except KeyError as exc:
            raise TypeError(f"Unknown client parameter '{key}'") from exc
        overrides[env_key] = str(value)
    return overrides


def _normalize_api_key(raw_key: Optional[str]) -> str:
    if raw_key is None:
        raise ConfigError("PAYREST_API_KEY must be provided")
    key = raw_key.strip()
    if not key:
        raise ConfigError("PAYREST_API_KEY must not be empty")
    if not _API_KEY_PATTERN.match(key):
        raise ConfigError(
            "PAYREST_API_KEY must start with 'live_', 'test_' or 'access_' "
            "and be at least 30 characters long after the prefix"
        )
    return key


def _parse_timeout(raw_timeout: str) -> int:
    try:
        timeout = int(raw_timeout)
    except ValueError as exc:
        raise ConfigError(
            f"PAYREST_TIMEOUT_SECONDS must be an integer, got '{raw_timeout}'"
        ) from exc
    if timeout <= 0:
        raise ConfigError("PAYREST_TIMEOUT_SECONDS must be greater than zero")
    return timeout


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    api_endpoint: str = DEFAULT_API_ENDPOINT
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: int = DEFAULT_TIMEOUT_SECONDS

    @property
    def base_url(self) -> str:
        return f"{self.api_endpoint}/{self.api_version}"

    @property
    def is_test_key(self) -> bool:
        return self.api_key.startswith("test_")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        api_key = _normalize_api_key(values.get("PAYREST_API_KEY"))

        api_endpoint = values.get("PAYREST_API_ENDPOINT", DEFAULT_API_ENDPOINT)
        api_endpoint = api_endpoint.strip().rstrip("/")
        if not api_endpoint:
            raise ConfigError("PAYREST_API_ENDPOINT must not be empty")

        api_version = values.get("PAYREST_API_VERSION", DEFAULT_API_VERSION)
        api_version = api_version.strip().strip("/")
        if not api_version:
            raise ConfigError("PAYREST_API_VERSION must not be empty")

        timeout_seconds = _parse_timeout(
            values.get("PAYREST_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
        )

        return cls(
            api_key=api_key,
            api_endpoint=api_endpoint,
            api_version=api_version,
            timeout_seconds=timeout_seconds,
        )

    @classmethod
    def from_env(
        cls,
        *,
        env_file: Optional[str] = ".env",
        overrides: Optional[Mapping[str, str]] = None,
        base: Optional[Mapping[str, str]] = None,
        parameters: Optional[ClientParameters] = None,
        api_key: Optional[str] = None,
        api_endpoint: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout_seconds: Optional[int | str] = None,
    ) -> "ClientConfig":
        parameter_overrides = _collect_parameter_overrides(
            parameters,
            {
                "api_key": api_key,
                "api_endpoint": api_endpoint,
                "api_version": api_version,
                "timeout_seconds": timeout_seconds,
            },
        )
        merged_overrides = dict(overrides or {})
        merged_overrides.update(parameter_overrides)

        environment = build_environment(
            env_file=env_file,
            base=base,
            overrides=merged_overrides,
        )
        return cls.from_mapping(environment.variables)


def load_client_config(
    *,
    env_file: Optional[str] = ".env",
    overrides: Optional[Mapping[str, str]] = None,
    base: Optional[Mapping[str, str]] = None,
    parameters: Optional[ClientParameters] = None,
    api_key: Optional[str] = None,
    api_endpoint: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout_seconds: Optional[int | str] = None,
) -> ClientConfig:
    """
    Convenience wrapper that mirrors :meth:`ClientConfig.from_env`.

    Settings can come from environment variables, a ``.env`` file, keyword
    arguments, or any combination of the three.
    """
    return ClientConfig.from_env(
        env_file=env_file,
        overrides=overrides,
        base=base,
        parameters=parameters,
        api_key=api_key,
        api_endpoint=api_endpoint,
        api_version=api_version,
        timeout_seconds=timeout_seconds,
    )
