"""Custom exception hierarchy for the BunnyCDN client."""
from __future__ import annotations

from typing import Any


class BunnyCDNError(RuntimeError):
    """Base error for BunnyCDN failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class InvalidArgumentError(BunnyCDNError, ValueError):
    """Raised when a caller-supplied value is missing, mistyped or out of bounds."""


class AuthenticationError(BunnyCDNError):
    """Raised when credentials are missing or rejected."""


class ConfigurationError(AuthenticationError):
    """Raised when an API key has not been configured."""


class UnauthorizedError(AuthenticationError):
    """Raised when the API answers 401."""


class RequestError(BunnyCDNError):
    """Raised when an HTTP request cannot be fulfilled."""


class BadRequestError(RequestError):
    """Raised when the API answers 400."""


class NotFoundError(RequestError):
    """Raised when the API answers 404 for an endpoint that documents it."""


class ServerError(RequestError):
    """Raised for any other non-success status."""


class UnexpectedResponseError(BunnyCDNError):
    """Raised when the API returns an unexpected payload structure."""


class ParseError(UnexpectedResponseError):
    """Raised when a timestamp or enumerated code in a payload cannot be interpreted."""
