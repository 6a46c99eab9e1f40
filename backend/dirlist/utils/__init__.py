"""Utility functions for the Directory Listing API."""

from dirlist.utils.formatters import format_bytes, format_duration, format_timestamp, parse_timestamp, utc_now
from dirlist.utils.validators import clamp_limit, clamp_page

__all__ = [
    "format_bytes",
    "format_duration",
    "format_timestamp",
    "parse_timestamp",
    "utc_now",
    "clamp_limit",
    "clamp_page",
]
