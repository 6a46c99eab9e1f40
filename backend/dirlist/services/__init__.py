"""Service layer for the Directory Listing API."""

from dirlist.services.base import FilesystemService
from dirlist.services.listing_service import ListingService
from dirlist.services.metadata_service import MetadataService
from dirlist.services.path_guard import PathGuard, ResolvedPath
from dirlist.services.permissions import (
    PermissionResolver,
    PosixPermissionResolver,
    WindowsPermissionResolver,
    get_permission_resolver,
)

__all__ = [
    "FilesystemService",
    "ListingService",
    "MetadataService",
    "PathGuard",
    "ResolvedPath",
    "PermissionResolver",
    "PosixPermissionResolver",
    "WindowsPermissionResolver",
    "get_permission_resolver",
]
