"""Data formatting utilities."""

from datetime import datetime, timezone
from typing import Optional


def format_bytes(bytes_value: int, decimal_places: int = 2) -> str:
    """
    Format bytes to human-readable string.

    Args:
        bytes_value: Size in bytes
        decimal_places: Number of decimal places

    Returns:
        Formatted string (e.g., "1.50 GB")
    """
    if bytes_value < 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    unit_index = 0

    size = float(bytes_value)
    while size >= 1024.0 and unit_index < len(units) - 1:
        size /= 1024.0
        unit_index += 1

    return f"{size:.{decimal_places}f} {units[unit_index]}"


def format_timestamp(timestamp: Optional[float]) -> str:
    """
    Format a POSIX timestamp as an ISO-8601 UTC string.

    Millisecond precision with a trailing "Z", e.g. "2024-01-15T10:30:00.000Z".

    Args:
        timestamp: Seconds since the epoch

    Returns:
        Formatted timestamp string, or "" when timestamp is None
    """
    if timestamp is None:
        return ""

    moment = datetime.fromtimestamp(timestamp, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: str) -> datetime:
    """
    Parse a string produced by format_timestamp back into an aware datetime.

    Args:
        value: ISO-8601 string

    Returns:
        Timezone-aware datetime (epoch for empty strings)
    """
    if not value:
        return datetime.fromtimestamp(0, tz=timezone.utc)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def utc_now() -> str:
    """Current time as an ISO-8601 UTC string."""
    return format_timestamp(datetime.now(tz=timezone.utc).timestamp())


def format_duration(seconds: float) -> str:
    """
    Format duration in seconds to human-readable string.

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration (e.g., "1m 23s")
    """
    if seconds < 60:
        return f"{seconds:.2f}s"

    minutes = int(seconds // 60)
    remaining_seconds = int(seconds % 60)

    if minutes < 60:
        return f"{minutes}m {remaining_seconds}s"

    hours = minutes // 60
    remaining_minutes = minutes % 60

    return f"{hours}h {remaining_minutes}m {remaining_seconds}s"
