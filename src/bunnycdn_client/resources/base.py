"""Common helpers for resource wrappers."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from ..endpoints import Endpoint

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import BunnyCDNClient


class ResourceBase:
    """Provide shared helpers for resource modules."""

    def __init__(self, client: BunnyCDNClient) -> None:
        self._client = client

    def _call(
        self,
        endpoint: Endpoint,
        *,
        path_params: Mapping[str, object] | None = None,
        params: Mapping[str, str] | None = None,
        payload: Mapping[str, Any] | None = None,
    ) -> Any:
        return self._client.call(
            endpoint,
            path_params=path_params,
            params=params,
            json_payload=payload,
        )

    @staticmethod
    def _page_params(page: int, size_name: str, size: int, **extra: str) -> dict[str, str]:
        params = {"page": str(page), size_name: str(size)}
        params.update(extra)
        return params
