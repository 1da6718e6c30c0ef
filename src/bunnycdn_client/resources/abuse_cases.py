"""Abuse case helpers."""

from __future__ import annotations

from .. import endpoints
from ..models import AbuseCase, AbuseCasePage
from ..validation import require_id, require_page, require_page_size
from .base import ResourceBase


class AbuseCasesResource(ResourceBase):
    """List and re-check abuse cases raised against the account."""

    def list(self, page: int = 1, per_page: int = 1000) -> AbuseCasePage:
        """Return one page of abuse cases.

        Args:
            page: 1-based page number.
            per_page: Page size, between 5 and 1000.
        """
        require_page(page)
        require_page_size(per_page, "per_page", minimum=5, maximum=1000)
        return self._call(
            endpoints.LIST_ABUSE_CASES,
            params=self._page_params(page, "perPage", per_page),
        )

    def check(self, case_id: int) -> AbuseCase:
        require_id(case_id, "case_id")
        return self._call(endpoints.CHECK_ABUSE_CASE, path_params={"id": case_id})
