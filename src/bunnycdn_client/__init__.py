"""High-level BunnyCDN client entrypoints."""
from .client import BunnyCDNClient
from .config import ClientConfig
from .exceptions import (
    BadRequestError,
    BunnyCDNError,
    ConfigurationError,
    InvalidArgumentError,
    NotFoundError,
    ParseError,
    ServerError,
    UnauthorizedError,
)
from .models import BillingRecordType

__all__ = [
    "BunnyCDNClient",
    "ClientConfig",
    "BunnyCDNError",
    "BadRequestError",
    "BillingRecordType",
    "ConfigurationError",
    "InvalidArgumentError",
    "NotFoundError",
    "ParseError",
    "ServerError",
    "UnauthorizedError",
]
