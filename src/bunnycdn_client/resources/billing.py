"""Billing helpers."""

from __future__ import annotations

from typing import Any

from .. import endpoints
from ..models import AffiliateDetails, BillingDetails, BillingSummaryItem
from .base import ResourceBase


class BillingResource(ResourceBase):
    """Read account billing state and affiliate credits."""

    def details(self) -> BillingDetails:
        """Return the balance, monthly charges and billing records.

        With ``populate_fields`` enabled each billing record gains a
        ``TypeName`` label derived from its ``Type`` code.
        """
        return self._call(endpoints.BILLING_DETAILS)

    def affiliate(self) -> AffiliateDetails:
        return self._call(endpoints.AFFILIATE_DETAILS)

    def claim_affiliate_credits(self) -> Any:
        """Move the affiliate balance into the account balance."""
        return self._call(endpoints.CLAIM_AFFILIATE_CREDITS)

    def summary(self) -> list[BillingSummaryItem]:
        return self._call(endpoints.BILLING_SUMMARY)
