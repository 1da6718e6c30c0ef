"""Post-processing of successful BunnyCDN payloads.

Two independent transformations are applied according to the client flags:

- ``parse_dates`` replaces ISO-8601 timestamp strings with aware ``datetime``
  values (naive timestamps are taken as UTC).
- ``populate_fields`` attaches human readable labels next to enumerated codes,
  for example ``BillingRecord.TypeName`` from ``BillingRecord.Type``.

Both are driven by a `RecordSchema` describing where the fields live. Absent
fields are skipped, values that are already converted are left alone, and the
input payload is never mutated.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any

from .exceptions import ParseError
from .models import BillingRecordType

_ISO_TIMESTAMP = re.compile(
    r"^(?P<main>\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}(?::\d{2})?)"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>Z|z|[+-]\d{2}:?\d{2})?$"
)


@dataclass(frozen=True, slots=True)
class EnumLabel:
    """Describe a numeric code field and the label field derived from it."""

    label_field: str
    enum: type[IntEnum]


@dataclass(frozen=True, slots=True)
class RecordSchema:
    """Locate timestamp, enumerated and nested record fields of a payload."""

    dates: tuple[str, ...] = ()
    labels: Mapping[str, EnumLabel] = field(default_factory=dict)
    nested: Mapping[str, RecordSchema] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not (self.dates or self.labels or self.nested)


def page_of(item_schema: RecordSchema) -> RecordSchema:
    """Schema for a paginated collection whose `Items` follow `item_schema`."""

    return RecordSchema(nested={"Items": item_schema})


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware ``datetime``.

    Fractions longer than microseconds are truncated and a trailing ``Z`` is
    read as UTC. Raises `ParseError` for anything else that does not parse.
    """

    if not isinstance(value, str):
        raise ParseError(f"Expected an ISO-8601 timestamp string, got {value!r}")
    text = value.strip()
    match = _ISO_TIMESTAMP.match(text)
    if match:
        text = match.group("main")
        fraction = match.group("fraction")
        if fraction:
            text += "." + fraction[:6].ljust(6, "0")
        offset = match.group("offset")
        if offset:
            if offset in ("Z", "z"):
                offset = "+00:00"
            elif ":" not in offset:
                offset = f"{offset[:3]}:{offset[3:]}"
            text += offset
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as exc:
        raise ParseError(f"Malformed timestamp {value!r}", details=value) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def label_for(enum: type[IntEnum], code: Any) -> str:
    if isinstance(code, bool) or not isinstance(code, int):
        raise ParseError(f"Expected an integer {enum.__name__} code, got {code!r}", details=code)
    try:
        return enum(code).name
    except ValueError as exc:
        raise ParseError(f"Unknown {enum.__name__} code {code}", details=code) from exc


def normalize(
    payload: Any,
    schema: RecordSchema | None,
    *,
    parse_dates: bool = False,
    populate_fields: bool = False,
) -> Any:
    """Return `payload` with the enabled transformations applied."""

    if schema is None or schema.is_empty or not (parse_dates or populate_fields):
        return payload
    return _walk(payload, schema, parse_dates, populate_fields)


def _walk(payload: Any, schema: RecordSchema, parse_dates: bool, populate_fields: bool) -> Any:
    if isinstance(payload, list):
        return [_walk(item, schema, parse_dates, populate_fields) for item in payload]
    if not isinstance(payload, Mapping):
        return payload

    record = dict(payload)
    if parse_dates:
        for name in schema.dates:
            value = record.get(name)
            if value is None or isinstance(value, datetime):
                continue
            record[name] = parse_timestamp(value)
    if populate_fields:
        for name, label in schema.labels.items():
            code = record.get(name)
            if code is None:
                continue
            record[label.label_field] = label_for(label.enum, code)
    for name, child in schema.nested.items():
        value = record.get(name)
        if value is None:
            continue
        record[name] = _walk(value, child, parse_dates, populate_fields)
    return record


ABUSE_CASE = RecordSchema(dates=("DateCreated", "DateUpdated", "Deadline"))
BILLING_RECORD = RecordSchema(
    dates=("Timestamp",),
    labels={"Type": EnumLabel("TypeName", BillingRecordType)},
)
BILLING_DETAILS = RecordSchema(nested={"BillingRecords": BILLING_RECORD})
TICKET_COMMENT = RecordSchema(dates=("DateCreated",))
TICKET = RecordSchema(dates=("DateCreated", "DateUpdated"), nested={"Comments": TICKET_COMMENT})
VIDEO_LIBRARY = RecordSchema(dates=("DateCreated",))
DNS_ZONE = RecordSchema(dates=("DateCreated", "DateModified", "NameserversNextCheck"))

ABUSE_CASE_PAGE = page_of(ABUSE_CASE)
TICKET_PAGE = page_of(TICKET)
VIDEO_LIBRARY_PAGE = page_of(VIDEO_LIBRARY)
DNS_ZONE_PAGE = page_of(DNS_ZONE)
