"""Parsing and formatting of request values."""

import re
from datetime import UTC, datetime
from uuid import UUID

from exercise_tracker.exceptions import InvalidIdentifierError

DATE_FORMAT = "%a %b %d %Y"

_INTEGER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_identifier(raw: str) -> UUID:
    """Parse a store identifier, rejecting anything that is not a UUID."""
    try:
        return UUID(raw.strip())
    except ValueError as exc:
        raise InvalidIdentifierError(f"invalid userId: {raw!r}") from exc


def parse_date(raw: str) -> datetime:
    """Parse an ISO 8601 date or datetime and normalise it to UTC.

    Naive values are taken as UTC. Raises ``ValueError`` for anything else,
    including offsets that push the value outside the representable range.
    """
    parsed = datetime.fromisoformat(raw.strip())
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    try:
        return parsed.astimezone(UTC)
    except OverflowError as exc:
        raise ValueError(f"date out of range: {raw!r}") from exc


def parse_int(raw: str) -> int:
    """Parse a plain ASCII decimal integer, raising ``ValueError`` otherwise."""
    cleaned = raw.strip()
    if not _INTEGER_RE.fullmatch(cleaned):
        raise ValueError(f"not an integer: {raw!r}")
    return int(cleaned)


def format_date(value: datetime) -> str:
    """Render a date as e.g. ``Sun Jan 01 2023`` in UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(DATE_FORMAT)
