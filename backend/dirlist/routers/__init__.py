"""API routers for the Directory Listing API."""

from dirlist.routers import directory, health

__all__ = ["directory", "health"]
