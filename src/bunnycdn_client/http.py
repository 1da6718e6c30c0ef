"""HTTP utilities for BunnyCDN API access."""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from requests import Response, Session

from .exceptions import (
    BadRequestError,
    BunnyCDNError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UnexpectedResponseError,
)

logger = logging.getLogger(__name__)

NO_CONTENT = 204

_STATUS_ERRORS: Mapping[int, tuple[type[BunnyCDNError], str]] = {
    400: (BadRequestError, "Bad request"),
    401: (UnauthorizedError, "Unauthorized"),
}


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper with helper accessors."""

    status_code: int
    data: Any
    headers: Mapping[str, str]


def ensure_success(
    response: Response,
    *,
    success: Collection[int] = (200,),
    not_found: bool = False,
) -> None:
    """Raise the typed error matching `response.status_code` unless it is accepted."""

    status = response.status_code
    if status in success:
        return
    logger.debug("BunnyCDN response rejected with status %s", status)
    details = _body_excerpt(response)
    known = _STATUS_ERRORS.get(status)
    if known is not None:
        error_cls, label = known
        raise error_cls(f"BunnyCDN API error {status}: {label}", status_code=status, details=details)
    if status == 404 and not_found:
        raise NotFoundError(
            "BunnyCDN API error 404: Not found", status_code=status, details=details
        )
    raise ServerError(
        f"BunnyCDN server error {status}", status_code=status, details=details
    )


def parse_json(response: Response) -> Any:
    """Parse JSON with helpful error context."""

    try:
        return response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            "Response did not contain valid JSON", status_code=response.status_code
        ) from exc


def request(
    session: Session,
    method: str,
    url: str,
    *,
    params: Mapping[str, str] | None = None,
    headers: MutableMapping[str, str] | None = None,
    json_payload: Mapping[str, Any] | None = None,
    success: Collection[int] = (200,),
    not_found: bool = False,
    expect_body: bool = True,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """Make a request and return a parsed response envelope.

    The body is only read once the status has been accepted, and never for
    `204 No Content` or when `expect_body` is false.
    """

    response = session.request(
        method=method,
        url=url,
        params=params,
        headers=headers,
        json=json_payload,
        timeout=timeout,
        verify=verify,
    )
    ensure_success(response, success=success, not_found=not_found)

    data: Any = None
    if expect_body and response.status_code != NO_CONTENT and response.content:
        data = parse_json(response)

    return HttpResponse(status_code=response.status_code, data=data, headers=response.headers)


def _body_excerpt(response: Response) -> str | None:
    try:
        text = response.text
    except (AttributeError, ValueError):
        return None
    return text[:200] if text else None


__all__ = ["HttpResponse", "ensure_success", "parse_json", "request"]
