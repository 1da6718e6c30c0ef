"""Catalog of the BunnyCDN API endpoints wrapped by this client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from . import normalize
from .normalize import RecordSchema


@dataclass(frozen=True, slots=True)
class Endpoint:
    """Describe how one API operation is requested and how its response is read."""

    name: str
    method: str
    path: str
    success: tuple[int, ...] = (200,)
    not_found: bool = False
    empty: bool = False
    schema: RecordSchema | None = None

    def format_path(self, **values: object) -> str:
        return self.path.format(**values)


LIST_ABUSE_CASES = Endpoint(
    "list_abuse_cases", "GET", "/abusecase", schema=normalize.ABUSE_CASE_PAGE
)
CHECK_ABUSE_CASE = Endpoint(
    "check_abuse_case", "POST", "/abusecase/{id}/check", schema=normalize.ABUSE_CASE
)
LIST_COUNTRIES = Endpoint("list_countries", "GET", "/country")
BILLING_DETAILS = Endpoint(
    "billing_details", "GET", "/billing", schema=normalize.BILLING_DETAILS
)
AFFILIATE_DETAILS = Endpoint("affiliate_details", "GET", "/billing/affiliate")
CLAIM_AFFILIATE_CREDITS = Endpoint(
    "claim_affiliate_credits", "POST", "/billing/affiliate/claim"
)
BILLING_SUMMARY = Endpoint("billing_summary", "GET", "/billing/summary")
LIST_TICKETS = Endpoint(
    "list_tickets", "GET", "/support/ticket/list", schema=normalize.TICKET_PAGE
)
GET_TICKET = Endpoint(
    "get_ticket",
    "GET",
    "/support/ticket/details/{id}",
    not_found=True,
    schema=normalize.TICKET,
)
CLOSE_TICKET = Endpoint(
    "close_ticket", "POST", "/support/ticket/{id}/close", success=(200, 204), empty=True
)
LIST_REGIONS = Endpoint("list_regions", "GET", "/region")
LIST_VIDEO_LIBRARIES = Endpoint(
    "list_video_libraries", "GET", "/videolibrary", schema=normalize.VIDEO_LIBRARY_PAGE
)
GET_VIDEO_LIBRARY = Endpoint(
    "get_video_library",
    "GET",
    "/videolibrary/{id}",
    not_found=True,
    schema=normalize.VIDEO_LIBRARY,
)
ADD_ALLOWED_REFERRER = Endpoint(
    "add_allowed_referrer",
    "POST",
    "/videolibrary/{id}/addAllowedReferrer",
    success=(204,),
    not_found=True,
    empty=True,
)
REMOVE_ALLOWED_REFERRER = Endpoint(
    "remove_allowed_referrer",
    "POST",
    "/videolibrary/{id}/removeAllowedReferrer",
    success=(204,),
    not_found=True,
    empty=True,
)
ADD_BLOCKED_REFERRER = Endpoint(
    "add_blocked_referrer",
    "POST",
    "/videolibrary/{id}/addBlockedReferrer",
    success=(204,),
    not_found=True,
    empty=True,
)
REMOVE_BLOCKED_REFERRER = Endpoint(
    "remove_blocked_referrer",
    "POST",
    "/videolibrary/{id}/removeBlockedReferrer",
    success=(204,),
    not_found=True,
    empty=True,
)
LIST_DNS_ZONES = Endpoint(
    "list_dns_zones", "GET", "/dnszone", not_found=True, schema=normalize.DNS_ZONE_PAGE
)

ENDPOINTS: Mapping[str, Endpoint] = {
    endpoint.name: endpoint
    for endpoint in (
        LIST_ABUSE_CASES,
        CHECK_ABUSE_CASE,
        LIST_COUNTRIES,
        BILLING_DETAILS,
        AFFILIATE_DETAILS,
        CLAIM_AFFILIATE_CREDITS,
        BILLING_SUMMARY,
        LIST_TICKETS,
        GET_TICKET,
        CLOSE_TICKET,
        LIST_REGIONS,
        LIST_VIDEO_LIBRARIES,
        GET_VIDEO_LIBRARY,
        ADD_ALLOWED_REFERRER,
        REMOVE_ALLOWED_REFERRER,
        ADD_BLOCKED_REFERRER,
        REMOVE_BLOCKED_REFERRER,
        LIST_DNS_ZONES,
    )
}


__all__ = ["ENDPOINTS", "Endpoint"]
