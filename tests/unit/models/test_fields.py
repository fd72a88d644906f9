"""Tests for the shared field converters."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from superhub.models._fields import (
    format_datetime,
    optional_bool,
    optional_float,
    optional_int,
    optional_str,
    parse_bool,
    parse_datetime,
    parse_optional_datetime,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2023-03-01T10:00:00Z", datetime(2023, 3, 1, 10, 0, tzinfo=UTC)),
        ("2023-03-01T10:00:00+00:00", datetime(2023, 3, 1, 10, 0, tzinfo=UTC)),
        ("2023-03-01T10:00:00.25Z", datetime(2023, 3, 1, 10, 0, 0, 250000, tzinfo=UTC)),
        ("2023-03-01T10:00:00.123456789Z", datetime(2023, 3, 1, 10, 0, 0, 123456, tzinfo=UTC)),
    ],
)
def test_parse_datetime(value, expected):
    assert parse_datetime(value) == expected


@pytest.mark.unit
def test_parse_datetime_keeps_offset():
    parsed = parse_datetime("2023-03-02T12:30:00+03:00")

    assert parsed.utcoffset() == timedelta(hours=3)
    assert parsed == datetime(2023, 3, 2, 9, 30, tzinfo=UTC)


@pytest.mark.unit
def test_parse_datetime_requires_timezone():
    with pytest.raises(ValueError, match="without timezone"):
        parse_datetime("2023-03-01T10:00:00")


@pytest.mark.unit
def test_parse_datetime_rejects_garbage():
    with pytest.raises(ValueError):
        parse_datetime("yesterday")


@pytest.mark.unit
def test_parse_datetime_rejects_non_strings():
    with pytest.raises(TypeError):
        parse_datetime(1677664800)


@pytest.mark.unit
def test_parse_optional_datetime():
    assert parse_optional_datetime(None) is None
    assert parse_optional_datetime("2023-03-01T10:00:00Z") == datetime(2023, 3, 1, 10, 0, tzinfo=UTC)


@pytest.mark.unit
def test_format_datetime():
    assert format_datetime(datetime(2023, 3, 1, 10, 0, tzinfo=UTC)) == "2023-03-01T10:00:00Z"
    moscow = timezone(timedelta(hours=3))
    assert format_datetime(datetime(2023, 3, 1, 13, 0, tzinfo=moscow)) == "2023-03-01T13:00:00+03:00"


@pytest.mark.unit
def test_optional_converters():
    assert optional_float(None) is None
    assert optional_float(3) == 3.0
    assert optional_int(None) is None
    assert optional_int("42") == 42
    assert optional_str(None) is None
    assert optional_str(5) == "5"


@pytest.mark.unit
def test_parse_bool():
    assert parse_bool(True) is True
    assert parse_bool(False) is False


@pytest.mark.unit
@pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
def test_parse_bool_rejects_non_booleans(value):
    with pytest.raises(TypeError):
        parse_bool(value)


@pytest.mark.unit
def test_optional_bool():
    assert optional_bool(None) is False
    assert optional_bool(None, default=True) is True
    assert optional_bool(True) is True
    with pytest.raises(TypeError):
        optional_bool("false")
