"""Argument checks performed before any request is built."""

from __future__ import annotations

from typing import Any

from .exceptions import InvalidArgumentError

MAX_PAGE = 2147483647


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def require_id(value: Any, name: str = "id") -> int:
    if not _is_int(value) or value < 1:
        raise InvalidArgumentError(f"{name} is required and must be a positive integer")
    return value


def require_page(value: Any) -> int:
    if not _is_int(value) or not 1 <= value <= MAX_PAGE:
        raise InvalidArgumentError(
            f"page must be an integer between 1 and {MAX_PAGE} inclusive"
        )
    return value


def require_page_size(
    value: Any,
    name: str = "per_page",
    *,
    minimum: int | None = None,
    maximum: int | None = None,
) -> int:
    if not _is_int(value):
        raise InvalidArgumentError(f"{name} is required and must be an integer")
    if (minimum is not None and value < minimum) or (maximum is not None and value > maximum):
        raise InvalidArgumentError(
            f"{name} must be between {minimum} and {maximum} inclusive"
        )
    return value


def require_string(value: Any, name: str) -> str:
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(f"{name} is required and must be a non-empty string")
    return value


def require_bool(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a boolean")
    return value
