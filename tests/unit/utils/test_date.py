"""Tests for the date utility functions."""

from datetime import datetime, timedelta, timezone

import pytest

from mcp_jira.utils import format_jira_datetime, parse_date


def test_parse_date_invalid_input():
    """Test that parse_date returns the input for unparseable dates."""
    assert parse_date("invalid") == "invalid"


def test_parse_date_empty():
    assert parse_date(None) == ""
    assert parse_date("") == ""


def test_parse_date_valid():
    assert parse_date("2021-01-01") == "2021-01-01"


def test_parse_date_epoch():
    """Test that parse_date accepts epoch milliseconds."""
    assert parse_date("1612156800000") == "2021-02-01"


def test_parse_date_jira_timestamp():
    assert parse_date("2021-01-01T12:30:00.000+0000", "%Y-%m-%d %H:%M") == "2021-01-01 12:30"


class TestFormatJiraDatetime:
    def test_utc_datetime(self):
        value = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        assert format_jira_datetime(value) == "2024-01-01T10:00:00.000+0000"

    def test_naive_datetime_is_utc(self):
        assert format_jira_datetime(datetime(2024, 1, 1, 10, 0)) == (
            "2024-01-01T10:00:00.000+0000"
        )

    def test_offset_is_preserved(self):
        value = datetime(2024, 6, 1, 8, 15, 30, 123456, tzinfo=timezone(timedelta(hours=2)))
        assert format_jira_datetime(value) == "2024-06-01T08:15:30.123+0200"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("2024-01-01T10:00:00Z", "2024-01-01T10:00:00.000+0000"),
            ("2024-01-01T10:00:00.5+05:30", "2024-01-01T10:00:00.500+0530"),
            ("2024-01-01 10:00", "2024-01-01T10:00:00.000+0000"),
        ],
    )
    def test_strings(self, value, expected):
        assert format_jira_datetime(value) == expected

    def test_defaults_to_now(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        formatted = format_jira_datetime()
        parsed = datetime.strptime(formatted, "%Y-%m-%dT%H:%M:%S.%f%z")
        assert parsed >= before
        assert formatted.endswith("+0000")

    def test_unparseable_string(self):
        with pytest.raises(ValueError):
            format_jira_datetime("garbage")
