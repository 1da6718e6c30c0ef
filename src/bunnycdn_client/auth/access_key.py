"""Account API key authentication."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass

from .base import AuthStrategy

ACCESS_KEY_HEADER = "AccessKey"


@dataclass(slots=True)
class AccessKeyAuth(AuthStrategy):
    """Send the account API key in the `AccessKey` header."""

    key: str

    def apply(self, headers: MutableMapping[str, str]) -> None:
        headers[ACCESS_KEY_HEADER] = self.key

    def __repr__(self) -> str:
        return "AccessKeyAuth(key='***')"
