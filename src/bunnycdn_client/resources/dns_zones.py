"""DNS zone helpers."""

from __future__ import annotations

from .. import endpoints
from ..models import DnsZonePage
from ..validation import require_page, require_page_size
from .base import ResourceBase


class DnsZonesResource(ResourceBase):
    def list(self, page: int = 1, per_page: int = 1000) -> DnsZonePage:
        require_page(page)
        require_page_size(per_page, "per_page", minimum=5, maximum=1000)
        return self._call(
            endpoints.LIST_DNS_ZONES,
            params=self._page_params(page, "perPage", per_page),
        )
