"""Tests for date conversion utilities."""

from datetime import datetime, timedelta, timezone

from youtrack_hot_issues.utils.date_parser import (
    format_datetime_for_youtrack,
    from_epoch_millis,
    utc_now,
)


class TestDateParser:
    """Test YouTrack date helpers."""

    def test_from_epoch_millis(self) -> None:
        """Test millisecond timestamps convert to aware UTC datetimes."""
        assert from_epoch_millis(1704067200000) == datetime(
            2024, 1, 1, tzinfo=timezone.utc
        )
        assert from_epoch_millis(1704067200500).microsecond == 500000

    def test_format_aware_datetime(self) -> None:
        """Test aware datetimes are converted to UTC before formatting."""
        dt = datetime(2024, 5, 25, 14, 30, tzinfo=timezone(timedelta(hours=2)))
        assert format_datetime_for_youtrack(dt) == "2024-05-25T12:30"

    def test_format_naive_datetime(self) -> None:
        """Test naive datetimes are formatted as-is."""
        assert format_datetime_for_youtrack(datetime(2024, 1, 2, 3, 4, 59)) == (
            "2024-01-02T03:04"
        )

    def test_utc_now_is_aware(self) -> None:
        """Test the current time carries UTC tzinfo."""
        assert utc_now().tzinfo == timezone.utc
