"""API response models."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field

from dirlist.models.base import CamelModel
from dirlist.models.entry import EntryDescriptor, Permissions

T = TypeVar("T")


class Pagination(CamelModel):
    """Pagination summary of a listing."""

    page: int = Field(..., description="Current page", ge=1)
    limit: int = Field(..., description="Page size applied", ge=1)
    total: int = Field(..., description="Total matching entries", ge=0)
    total_pages: int = Field(..., description="Number of pages", ge=0)
    has_next: bool = Field(..., description="Whether a later page exists")
    has_previous: bool = Field(..., description="Whether an earlier page exists")


class ListingSummary(CamelModel):
    """Aggregates over the full filtered entry set."""

    total_files: int = Field(..., description="Number of file entries", ge=0)
    total_directories: int = Field(..., description="Number of directory entries", ge=0)
    total_size: int = Field(..., description="Combined size of file entries in bytes", ge=0)
    scanned_at: str = Field(..., description="Scan timestamp (ISO-8601)")


class ListingResult(CamelModel):
    """One page of a directory listing."""

    path: str = Field(..., description="Resolved directory path")
    items: list[EntryDescriptor] = Field(default_factory=list, description="Entries on this page")
    pagination: Pagination
    metadata: ListingSummary


class DirectoryMetadata(CamelModel):
    """Lightweight descriptor of a single path."""

    path: str = Field(..., description="Resolved path")
    exists: bool = Field(..., description="Whether the path exists and is readable")
    is_directory: bool = Field(False, description="Whether the path is a directory")
    permissions: Permissions = Field(default_factory=Permissions)
    total_items: int = Field(0, description="Number of immediate children", ge=0)
    total_size: int = Field(0, description="Combined size of immediate file children", ge=0)
    last_accessed: str = Field("", description="Last accessed timestamp (ISO-8601)")
    last_modified: str = Field("", description="Last modified timestamp (ISO-8601)")
    created: str = Field("", description="Creation timestamp (ISO-8601)")

    @classmethod
    def absent(cls, path: str) -> "DirectoryMetadata":
        """Descriptor for a path that does not exist."""
        return cls(path=path, exists=False)


class ApiResponse(BaseModel, Generic[T]):
    """Success envelope."""

    success: bool = True
    data: T


class ErrorDetail(BaseModel):
    """Error body."""

    message: str = Field(..., description="Error message")
    stack: Optional[str] = Field(None, description="Traceback (non-production only)")


class ErrorResponse(BaseModel):
    """Error envelope."""

    error: ErrorDetail
    timestamp: str = Field(..., description="When the error occurred (ISO-8601)")


class ValidationErrorResponse(BaseModel):
    """Request validation failure."""

    error: str = Field("Validation failed", description="Error type")
    details: list[dict[str, Any]] = Field(default_factory=list, description="Validation errors")
