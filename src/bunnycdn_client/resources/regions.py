"""Region list."""

from __future__ import annotations

from .. import endpoints
from ..models import Region
from .base import ResourceBase


class RegionsResource(ResourceBase):
    """Read the edge regions and their pricing."""

    def list(self) -> list[Region]:
        return self._call(endpoints.LIST_REGIONS)
