"""
Timestamp helpers for epoch-millisecond price series.

Price series carry integer epoch milliseconds. These helpers convert them to
UTC datetimes and to the short display labels used on charts.
"""

from datetime import datetime, timezone

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
           "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def ms_to_datetime(timestamp_ms: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch

    Returns:
        UTC datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)


def datetime_to_ms(dt: datetime) -> int:
    """Convert a datetime to epoch milliseconds (naive values are taken as UTC)."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return round(dt.timestamp() * 1000)


def format_label(timestamp_ms: int) -> str:
    """
    Format a timestamp as a short day label such as ``"Jan 5"``.

    Month names are fixed English abbreviations so the output does not depend
    on the process locale.
    """
    dt = ms_to_datetime(timestamp_ms)
    return f"{_MONTHS[dt.month - 1]} {dt.day}"
