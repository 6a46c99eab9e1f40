"""Validation utilities."""

from typing import Optional


def clamp_page(page: Optional[int]) -> int:
    """
    Normalize a page number.

    Args:
        page: Requested page (1-based)

    Returns:
        Page number, at least 1
    """
    if page is None or page < 1:
        return 1
    return page


def clamp_limit(limit: Optional[int], max_limit: int, default_limit: int) -> int:
    """
    Clamp limit parameter into [1, max_limit].

    Args:
        limit: Requested limit
        max_limit: Maximum allowed limit
        default_limit: Default limit if None

    Returns:
        Clamped limit value
    """
    if limit is None:
        return default_limit

    if limit < 1:
        return 1

    if limit > max_limit:
        return max_limit

    return limit
