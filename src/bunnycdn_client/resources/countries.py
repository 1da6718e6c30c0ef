"""Country list."""

from __future__ import annotations

from .. import endpoints
from ..models import Country
from .base import ResourceBase


class CountriesResource(ResourceBase):
    def list(self) -> list[Country]:
        return self._call(endpoints.LIST_COUNTRIES)
