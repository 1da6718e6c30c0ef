"""Configuration helpers for BunnyCDN client."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

DEFAULT_BASE_URL = "https://api.bunny.net"

# Option keys accepted by `ClientConfig.apply_options`, with camelCase aliases.
OPTION_KEYS: Mapping[str, str] = {
    "parse_dates": "parse_dates",
    "parseDates": "parse_dates",
    "populate_fields": "populate_fields",
    "populateFields": "populate_fields",
}

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `BunnyCDNClient`."""

    base_url: str = DEFAULT_BASE_URL
    access_key: str | None = None
    parse_dates: bool = False
    populate_fields: bool = False
    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

    def apply_options(self, options: Any) -> None:
        """Merge recognized boolean flags, ignoring unknown keys and other types."""

        if not isinstance(options, Mapping):
            return
        for key, value in options.items():
            attribute = OPTION_KEYS.get(key)
            if attribute is None or not isinstance(value, bool):
                continue
            setattr(self, attribute, value)


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return default


def env_verify(name: str, default: bool | str = True) -> bool | str:
    """Read a verify setting that may be a boolean flag or a CA bundle path."""

    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    normalized = raw.strip().lower()
    if normalized in _TRUTHY:
        return True
    if normalized in _FALSY:
        return False
    return raw.strip()
