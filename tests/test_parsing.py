"""Tests for request value parsing."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from exercise_tracker.exceptions import InvalidIdentifierError
from exercise_tracker.parsing import (
    format_date,
    parse_date,
    parse_identifier,
    parse_int,
)


def test_parse_date_treats_naive_values_as_utc() -> None:
    assert parse_date(" 2023-01-01 ") == datetime(2023, 1, 1, tzinfo=UTC)


def test_parse_date_normalises_offset_to_utc() -> None:
    parsed = parse_date("2023-01-01T10:00:00+02:00")

    assert parsed == datetime(2023, 1, 1, 8, tzinfo=UTC)
    assert parsed.utcoffset() == timedelta(0)


def test_parse_date_rejects_offset_outside_range() -> None:
    with pytest.raises(ValueError):
        parse_date("0001-01-01T00:00+05:00")


def test_parse_date_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_date("not a date")


def test_format_date_renders_day_month_year() -> None:
    assert format_date(datetime(2023, 1, 1, tzinfo=UTC)) == "Sun Jan 01 2023"


def test_format_date_converts_to_utc() -> None:
    late = datetime(2023, 1, 1, 23, 30, tzinfo=timezone(timedelta(hours=-5)))

    assert format_date(late) == "Mon Jan 02 2023"


def test_parse_int_rejects_fractions() -> None:
    assert parse_int(" 30 ") == 30
    assert parse_int("-5") == -5
    with pytest.raises(ValueError):
        parse_int("30.5")


@pytest.mark.parametrize("raw", ["1_000", "\u0663\u0660", "", "3 0"])
def test_parse_int_rejects_non_plain_digits(raw: str) -> None:
    with pytest.raises(ValueError):
        parse_int(raw)


def test_parse_identifier_rejects_non_uuid() -> None:
    with pytest.raises(InvalidIdentifierError):
        parse_identifier("5f1d7a2b9c")
