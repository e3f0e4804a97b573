"""
Unit tests for date utility functions.
"""

import pytest
from datetime import date, datetime, timezone
from src.utils.date_utils import (
    format_date,
    format_date_general,
    to_datetime,
)


class TestToDatetime:
    """Tests for to_datetime function."""

    def test_naive_datetime_unchanged(self):
        """Test that naive datetimes pass through."""
        dt = datetime(2024, 3, 5, 8, 30)
        assert to_datetime(dt) == dt

    def test_date_becomes_midnight(self):
        """Test that a plain date becomes local midnight."""
        assert to_datetime(date(2024, 3, 5)) == datetime(2024, 3, 5)

    def test_iso_string(self):
        """Test parsing an ISO-8601 string."""
        dt = to_datetime("2024-03-05T10:15:00")
        assert (dt.year, dt.month, dt.day, dt.hour) == (2024, 3, 5, 10)

    def test_zulu_string_is_aware(self):
        """Test that a trailing Z is read as UTC."""
        dt = to_datetime("2024-03-05T10:15:00Z")
        assert dt.tzinfo is not None
        assert dt.astimezone(timezone.utc).hour == 10

    def test_invalid_string_raises(self):
        """Test that garbage strings raise ValueError."""
        with pytest.raises(ValueError, match="Invalid date string"):
            to_datetime("not-a-date")

    def test_wrong_type_raises(self):
        """Test that non date-like values raise TypeError."""
        with pytest.raises(TypeError):
            to_datetime(12345)


class TestFormatDate:
    """Tests for format_date function."""

    def test_known_date(self):
        """Test yyyy/MM/dd output for a fixed date."""
        assert format_date(datetime(2024, 3, 5)) == "2024/03/05"

    def test_time_is_ignored(self):
        """Test that the time of day does not change the output."""
        assert format_date(datetime(2024, 3, 5, 23, 59, 59)) == "2024/03/05"

    def test_zero_padding(self):
        """Test month/day padding and four-digit year."""
        assert format_date(datetime(987, 1, 2)) == "0987/01/02"

    def test_accepts_date_and_string(self):
        """Test date and ISO string inputs."""
        assert format_date(date(2024, 12, 31)) == "2024/12/31"
        assert format_date("2024-12-31") == "2024/12/31"


class TestFormatDateGeneral:
    """Tests for format_date_general function."""

    @pytest.mark.parametrize("as_string", [True, False])
    def test_none_returns_none(self, as_string):
        """Test that a missing date returns None in both shapes."""
        assert format_date_general(None, as_string) is None

    def test_as_string(self):
        """Test yyyy-MM-dd output."""
        assert format_date_general(datetime(2024, 3, 5), True) == "2024-03-05"

    def test_as_parts(self):
        """Test labelled day/month/year output."""
        result = format_date_general(datetime(2024, 3, 5), False)
        assert result == {"day": "05", "month": "03", "year": "2024"}

    def test_parts_are_strings(self):
        """Test that components keep their zero padding as strings."""
        result = format_date_general(date(2024, 1, 9), as_string=False)
        assert result["day"] == "09"
        assert result["month"] == "01"
        assert isinstance(result["year"], str)

    def test_string_input(self):
        """Test ISO string input."""
        assert format_date_general("2024-03-05T08:00:00", True) == "2024-03-05"
