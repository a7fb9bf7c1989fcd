"""
Tests for the declarative request validator
"""

from datetime import date, datetime, timezone

import pytest

from carshop_api.app.core.errors import ValidationFailed
from carshop_api.app.core.validation import (
    Rule,
    car_year_range,
    int_between,
    iso_datetime,
    parse_iso_datetime,
    present,
    validate,
)


class TestChecks:
    """Test cases for individual checks"""

    @pytest.mark.parametrize("value", ["Toyota", "0", 0, " "])
    def test_present_accepts(self, value):
        ok, normalized = present()(value)
        assert ok
        assert normalized == value

    @pytest.mark.parametrize("value", [None, ""])
    def test_present_rejects(self, value):
        ok, _ = present()(value)
        assert not ok

    def test_int_between_accepts_ints_and_digit_strings(self):
        check = int_between(1980, 2027)
        assert check(2021) == (True, 2021)
        assert check("2021") == (True, 2021)
        assert check(1980) == (True, 1980)
        assert check(2027) == (True, 2027)

    def test_int_between_accepts_integral_floats(self):
        check = int_between(1980, 2027)
        ok, number = check(2021.0)
        assert ok
        assert number == 2021
        assert isinstance(number, int)

    @pytest.mark.parametrize("value", [1979, 2028, "20x1", 2021.5, 1979.0, " 2021", "2021 ", True, None, ""])
    def test_int_between_rejects(self, value):
        ok, _ = int_between(1980, 2027)(value)
        assert not ok

    @pytest.mark.parametrize("value", [
        "2030-05-01T11:00:00",
        "2030-05-01T11:00:00Z",
        "2030-05-01T11:00:00.000+05:30",
        "2030-05-01",
        "2030-05-01T11",
        "2030-05",
        "2030",
    ])
    def test_iso_datetime_accepts(self, value):
        ok, normalized = iso_datetime()(value)
        assert ok
        assert normalized == value

    @pytest.mark.parametrize("value", ["tomorrow", "31/12/2030", "", " 2030-05-01", "2030-13", None, 1700000000])
    def test_iso_datetime_rejects(self, value):
        ok, _ = iso_datetime()(value)
        assert not ok

    def test_parse_iso_datetime_keeps_offset(self):
        parsed = parse_iso_datetime("2030-05-01T11:00:00+02:00")
        assert isinstance(parsed, datetime)
        assert parsed.utcoffset().total_seconds() == 7200

    @pytest.mark.parametrize("value,expected", [
        ("2030", datetime(2030, 1, 1, tzinfo=timezone.utc)),
        ("2030-05", datetime(2030, 5, 1, tzinfo=timezone.utc)),
        ("2030-05-01", datetime(2030, 5, 1, tzinfo=timezone.utc)),
    ])
    def test_date_only_is_utc_midnight(self, value, expected):
        assert parse_iso_datetime(value) == expected

    def test_date_time_without_offset_is_naive(self):
        assert parse_iso_datetime("2030-05-01T11:30") == datetime(2030, 5, 1, 11, 30)

    def test_car_year_range_ends_next_year(self):
        assert car_year_range(date(2026, 10, 19)) == (1980, 2027)


class TestValidate:
    """Test cases for rule evaluation"""

    def setup_method(self):
        self.rules = [
            Rule("name", present(), "Name is required"),
            Rule("year", int_between(2000, 2010), "Bad year"),
            Rule("when", iso_datetime(), "Bad date"),
        ]

    def test_returns_normalized_values(self):
        cleaned = validate({"name": "x", "year": "2005", "when": "2030-01-01T09:00:00", "extra": 1}, self.rules)
        assert cleaned == {"name": "x", "year": 2005, "when": "2030-01-01T09:00:00"}

    def test_collects_every_failure_in_rule_order(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate({"year": 1999, "when": "nope"}, self.rules)
        assert exc_info.value.errors == [
            {"field": "name", "message": "Name is required"},
            {"field": "year", "message": "Bad year"},
            {"field": "when", "message": "Bad date"},
        ]

    def test_single_failure(self):
        with pytest.raises(ValidationFailed) as exc_info:
            validate({"name": "x", "year": 2001, "when": "later"}, self.rules)
        assert [e["field"] for e in exc_info.value.errors] == ["when"]
        assert exc_info.value.status_code == 400
