import pytest
from requests_mock import ANY

from bunnycdn_client import BunnyCDNClient
from bunnycdn_client.endpoints import ENDPOINTS
from bunnycdn_client.exceptions import (
    BadRequestError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
)

BASE_URL = "https://api.bunny.net"

OPERATIONS = {
    "list_abuse_cases": lambda c: c.abuse_cases.list(1, 5),
    "check_abuse_case": lambda c: c.abuse_cases.check(10),
    "list_countries": lambda c: c.countries.list(),
    "billing_details": lambda c: c.billing.details(),
    "affiliate_details": lambda c: c.billing.affiliate(),
    "claim_affiliate_credits": lambda c: c.billing.claim_affiliate_credits(),
    "billing_summary": lambda c: c.billing.summary(),
    "list_tickets": lambda c: c.support.list_tickets(1, 10),
    "get_ticket": lambda c: c.support.get_ticket(5),
    "close_ticket": lambda c: c.support.close_ticket(5),
    "list_regions": lambda c: c.regions.list(),
    "list_video_libraries": lambda c: c.video_libraries.list(1, 5),
    "get_video_library": lambda c: c.video_libraries.get(3),
    "add_allowed_referrer": lambda c: c.video_libraries.add_allowed_referrer(3, "a.example"),
    "remove_allowed_referrer": lambda c: c.video_libraries.remove_allowed_referrer(3, "a.example"),
    "add_blocked_referrer": lambda c: c.video_libraries.add_blocked_referrer(3, "a.example"),
    "remove_blocked_referrer": lambda c: c.video_libraries.remove_blocked_referrer(3, "a.example"),
    "list_dns_zones": lambda c: c.dns_zones.list(1, 5),
}


def build_client(**kwargs):
    return BunnyCDNClient("test-key", **kwargs)


def test_every_catalogued_endpoint_has_an_operation():
    assert set(OPERATIONS) == set(ENDPOINTS)


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_unauthorized_is_raised_for_every_operation(requests_mock, name):
    client = build_client()
    requests_mock.register_uri(ANY, ANY, status_code=401, json={"Items": [], "Message": "ok"})

    with pytest.raises(UnauthorizedError) as excinfo:
        OPERATIONS[name](client)

    assert excinfo.value.status_code == 401


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_bad_request_is_raised_for_every_operation(requests_mock, name):
    client = build_client()
    requests_mock.register_uri(ANY, ANY, status_code=400, json={"Message": "bad"})

    with pytest.raises(BadRequestError):
        OPERATIONS[name](client)


@pytest.mark.parametrize("name", sorted(OPERATIONS))
def test_not_found_only_where_documented(requests_mock, name):
    client = build_client()
    requests_mock.register_uri(ANY, ANY, status_code=404, json={"Message": "missing"})
    expected = NotFoundError if ENDPOINTS[name].not_found else ServerError

    with pytest.raises(expected) as excinfo:
        OPERATIONS[name](client)

    assert excinfo.value.status_code == 404


@pytest.mark.parametrize("status", [201, 302, 409, 429, 500, 503])
def test_other_statuses_raise_server_error_with_raw_code(requests_mock, status):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/region", status_code=status, text="upstream says no")

    with pytest.raises(ServerError) as excinfo:
        client.regions.list()

    assert excinfo.value.status_code == status
    assert excinfo.value.details == "upstream says no"


def test_referrer_update_rejects_200_as_unexpected(requests_mock):
    client = build_client()
    requests_mock.post(
        f"{BASE_URL}/videolibrary/3/addAllowedReferrer", status_code=200, json={}
    )

    with pytest.raises(ServerError):
        client.video_libraries.add_allowed_referrer(3, "a.example")


def test_close_ticket_204_does_not_read_body():
    class UnreadableResponse:
        status_code = 204
        headers: dict[str, str] = {}

        @property
        def content(self):  # pragma: no cover - must not be touched
            raise AssertionError("body was read")

        @property
        def text(self):  # pragma: no cover - must not be touched
            raise AssertionError("body was read")

        def json(self):  # pragma: no cover - must not be touched
            raise AssertionError("body was read")

    class StubSession:
        def __init__(self):
            self.calls = []

        def request(self, **kwargs):
            self.calls.append(kwargs)
            return UnreadableResponse()

        def close(self):  # pragma: no cover - helper
            pass

    session = StubSession()
    client = build_client(session=session)

    assert client.support.close_ticket(42) is None
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == f"{BASE_URL}/support/ticket/42/close"


def test_close_ticket_accepts_200_with_empty_body(requests_mock):
    client = build_client()
    requests_mock.post(f"{BASE_URL}/support/ticket/42/close", status_code=200, text="")

    assert client.support.close_ticket(42) is None


def test_raw_request_applies_classification(requests_mock):
    client = build_client()
    requests_mock.delete(f"{BASE_URL}/pullzone/1", status_code=204)

    assert client.request("DELETE", "/pullzone/1", success=(204,)) is None


def test_raw_request_returns_payload(requests_mock):
    client = build_client()
    requests_mock.get(f"{BASE_URL}/statistics", json={"TotalRequestsServed": 10})

    assert client.request("GET", "statistics") == {"TotalRequestsServed": 10}
