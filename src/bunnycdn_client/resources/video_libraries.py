"""Video library helpers."""

from __future__ import annotations

from .. import endpoints
from ..endpoints import Endpoint
from ..models import VideoLibrary, VideoLibraryPage
from ..validation import require_bool, require_id, require_page, require_page_size, require_string
from .base import ResourceBase


class VideoLibrariesResource(ResourceBase):
    """Read video libraries and manage their referrer lists."""

    def list(
        self,
        page: int = 1,
        page_size: int = 1000,
        include_access_key: bool = False,
    ) -> VideoLibraryPage:
        """Return one page of video libraries.

        Args:
            page: 1-based page number.
            page_size: Page size, between 5 and 1000.
            include_access_key: Ask the API to include each library's API keys.
        """
        require_page(page)
        require_page_size(page_size, "page_size", minimum=5, maximum=1000)
        require_bool(include_access_key, "include_access_key")
        return self._call(
            endpoints.LIST_VIDEO_LIBRARIES,
            params=self._page_params(
                page,
                "pageSize",
                page_size,
                includeAccessKey="true" if include_access_key else "false",
            ),
        )

    def get(self, library_id: int) -> VideoLibrary:
        require_id(library_id, "library_id")
        return self._call(endpoints.GET_VIDEO_LIBRARY, path_params={"id": library_id})

    def add_allowed_referrer(self, library_id: int, hostname: str) -> None:
        self._update_referrers(endpoints.ADD_ALLOWED_REFERRER, library_id, hostname)

    def remove_allowed_referrer(self, library_id: int, hostname: str) -> None:
        self._update_referrers(endpoints.REMOVE_ALLOWED_REFERRER, library_id, hostname)

    def add_blocked_referrer(self, library_id: int, hostname: str) -> None:
        self._update_referrers(endpoints.ADD_BLOCKED_REFERRER, library_id, hostname)

    def remove_blocked_referrer(self, library_id: int, hostname: str) -> None:
        self._update_referrers(endpoints.REMOVE_BLOCKED_REFERRER, library_id, hostname)

    def _update_referrers(self, endpoint: Endpoint, library_id: int, hostname: str) -> None:
        require_id(library_id, "library_id")
        require_string(hostname, "hostname")
        self._call(
            endpoint,
            path_params={"id": library_id},
            payload={"Hostname": hostname},
        )
