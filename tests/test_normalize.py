from datetime import datetime, timezone

from deadline_engine.normalize import (
    force_utc_designator,
    inject_missing_year,
    normalize,
    repair,
    to_canonical,
)
from deadline_engine.schema import INVALID


def test_inject_missing_year_only_for_yearless():
    assert inject_missing_year("12-25 10:00:00", 2024) == "2024-12-25 10:00:00"
    assert inject_missing_year("2024-12-25 10:00:00", 2030) == "2024-12-25 10:00:00"
    assert inject_missing_year("not-a-date", 2024) == "not-a-date"


def test_force_utc_designator_only_with_space():
    assert force_utc_designator("2024-12-25 10:00:00", 2024) == "2024-12-25T10:00:00Z"
    assert force_utc_designator("2024-12-25T10:00:00Z", 2024) == "2024-12-25T10:00:00Z"


def test_repair_runs_stages_in_order():
    assert repair("12-25 10:00:00", 2024) == "2024-12-25T10:00:00Z"


def test_full_datetime_is_read_as_utc():
    result = normalize("2024-12-25 10:00:00", year=2024)
    assert result == datetime(2024, 12, 25, 10, 0, 0, tzinfo=timezone.utc)


def test_yearless_matches_explicit_year():
    assert normalize("12-25 10:00:00", year=2024) == normalize("2024-12-25 10:00:00", year=2024)


def test_already_iso_passes_through_and_is_idempotent():
    first = normalize("2024-12-25 10:00:00", year=2024)
    again = normalize(to_canonical(first), year=1999)
    assert again == first
    assert normalize("2024-12-25T10:00:00Z") == first

    fractional = normalize("2024-12-25 10:00:00.500", year=2024)
    assert fractional.microsecond == 500_000
    assert to_canonical(fractional) == "2024-12-25T10:00:00.500000Z"
    assert normalize(to_canonical(fractional)) == fractional


def test_offset_is_converted_to_utc():
    assert normalize("2024-12-25T19:00:00+09:00") == datetime(2024, 12, 25, 10, tzinfo=timezone.utc)


def test_unparseable_is_invalid():
    assert normalize("not-a-date") is INVALID
    assert normalize("13-45 99:00:00", year=2024) is INVALID
    assert normalize("") is INVALID
    assert normalize(None) is INVALID


def test_default_year_is_current_utc_year():
    result = normalize("01-01 00:00:00")
    assert result.year == datetime.now(timezone.utc).year


def test_to_canonical():
    instant = datetime(2024, 12, 25, 10, 0, 0, tzinfo=timezone.utc)
    assert to_canonical(instant) == "2024-12-25T10:00:00Z"
