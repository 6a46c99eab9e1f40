"""Pydantic models for API request/response."""

from dirlist.models.entry import EntryDescriptor, EntryKind, EntryPermissions, Permissions
from dirlist.models.query import ListingQuery, SortKey, SortOrder
from dirlist.models.response import (
    ApiResponse,
    DirectoryMetadata,
    ErrorResponse,
    ListingResult,
    ListingSummary,
    Pagination,
    ValidationErrorResponse,
)

__all__ = [
    "EntryDescriptor",
    "EntryKind",
    "EntryPermissions",
    "Permissions",
    "ListingQuery",
    "SortKey",
    "SortOrder",
    "ApiResponse",
    "DirectoryMetadata",
    "ErrorResponse",
    "ListingResult",
    "ListingSummary",
    "Pagination",
    "ValidationErrorResponse",
]
