"""Date conversion utilities for YouTrack queries and payloads."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def from_epoch_millis(value: int) -> datetime:
    """Convert a YouTrack timestamp (milliseconds since epoch) to a datetime.

    Args:
        value: Milliseconds since the Unix epoch, as returned by the REST API

    Returns:
        Timezone-aware UTC datetime
    """
    return datetime.fromtimestamp(value / 1000, tz=timezone.utc)


def format_datetime_for_youtrack(dt: datetime) -> str:
    """Format datetime for YouTrack search query syntax.

    YouTrack accepts minute precision in date ranges, e.g. ``2024-01-15T10:30``.
    Naive datetimes are assumed to be UTC.

    Args:
        dt: Datetime object to format

    Returns:
        Date string usable inside a YouTrack query
    """
    if dt.tzinfo is not None:
        dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M")
