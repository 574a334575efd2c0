from datetime import timezone

from src.utils.date_format import format_dutch_date_time, parse_timestamp


def test_parse_timestamp_accepts_zulu_and_offsets() -> None:
    zulu = parse_timestamp("2024-03-15T14:30:00Z")
    offset = parse_timestamp("2024-03-15T15:30:00+01:00")

    assert zulu is not None and offset is not None
    assert zulu == offset
    assert zulu.tzinfo is not None


def test_parse_timestamp_treats_naive_values_as_utc() -> None:
    parsed = parse_timestamp("2024-03-15")

    assert parsed is not None
    assert parsed.tzinfo == timezone.utc
    assert (parsed.year, parsed.month, parsed.day, parsed.hour) == (2024, 3, 15, 0)


def test_parse_timestamp_rejects_missing_and_garbage() -> None:
    assert parse_timestamp(None) is None
    assert parse_timestamp("") is None
    assert parse_timestamp("not a date") is None
    assert parse_timestamp("2024-13-45T99:00:00Z") is None


def test_format_uses_dutch_conventions_in_amsterdam_time() -> None:
    # 14:30 UTC is 15:30 in Amsterdam (CET, before the switch to summer time)
    assert format_dutch_date_time("2024-03-15T14:30:00Z") == ("15-03-2024", "15:30", True)


def test_format_respects_summer_time() -> None:
    assert format_dutch_date_time("2024-07-01T08:05:00Z") == ("01-07-2024", "10:05", True)


def test_format_in_other_timezone() -> None:
    assert format_dutch_date_time("2024-03-15T14:30:00Z", "UTC") == ("15-03-2024", "14:30", True)


def test_format_degrades_to_unknown() -> None:
    assert format_dutch_date_time(None) == ("Unknown", "Unknown", False)
    assert format_dutch_date_time("gisteren") == ("Unknown", "Unknown", False)
