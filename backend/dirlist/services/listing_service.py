"""Directory listing service."""

import logging
import math
import os
import stat
import time
from typing import Callable, Optional

from dirlist.models.entry import EntryDescriptor, EntryKind
from dirlist.models.query import ListingQuery, SortKey, SortOrder
from dirlist.models.response import ListingResult, ListingSummary, Pagination
from dirlist.services.base import FilesystemService
from dirlist.services.errors import DirectoryReadError, NotDirectoryError, PathNotFoundError
from dirlist.services.path_guard import ResolvedPath
from dirlist.utils.formatters import (
    format_bytes,
    format_duration,
    format_timestamp,
    parse_timestamp,
    utc_now,
)

logger = logging.getLogger(__name__)


SORT_KEYS: dict[SortKey, Callable[[EntryDescriptor], object]] = {
    SortKey.NAME: lambda entry: (entry.name.casefold(), entry.name),
    SortKey.SIZE: lambda entry: entry.size,
    SortKey.MODIFIED: lambda entry: parse_timestamp(entry.modified_date),
    SortKey.TYPE: lambda entry: entry.kind.value,
}


def sort_entries(
    entries: list[EntryDescriptor],
    sort_by: SortKey = SortKey.NAME,
    sort_order: SortOrder = SortOrder.ASC,
) -> list[EntryDescriptor]:
    """
    Sort entries, keeping enumeration order for equal keys.

    Args:
        entries: Entries in enumeration order
        sort_by: Sort key
        sort_order: Sort direction

    Returns:
        New sorted list
    """
    # reverse=True keeps ties in enumeration order
    return sorted(entries, key=SORT_KEYS[sort_by], reverse=sort_order is SortOrder.DESC)


def summarize(entries: list[EntryDescriptor]) -> ListingSummary:
    """
    Compute aggregates over the full filtered entry set.

    Args:
        entries: All entries that passed filtering

    Returns:
        ListingSummary with file/directory counts and total file bytes
    """
    files = [entry for entry in entries if not entry.is_directory]
    return ListingSummary(
        total_files=len(files),
        total_directories=len(entries) - len(files),
        total_size=sum(entry.size for entry in files),
        scanned_at=utc_now(),
    )


def paginate(entries: list[EntryDescriptor], page: int, limit: int) -> tuple[list[EntryDescriptor], Pagination]:
    """
    Slice one page out of a sorted entry set.

    Args:
        entries: Sorted entries
        page: Page number (1-based)
        limit: Page size

    Returns:
        Tuple of (page items, pagination summary)
    """
    total = len(entries)
    total_pages = math.ceil(total / limit)
    start = (page - 1) * limit

    pagination = Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_previous=page > 1,
    )
    return entries[start:start + limit], pagination


class ListingService:
    """Service for paginated directory listings."""

    def __init__(self, fs: FilesystemService):
        """
        Initialize listing service.

        Args:
            fs: Filesystem service providing guard, resolver and worker pool
        """
        self.fs = fs

    def resolve_entry(self, directory: str, name: str) -> Optional[EntryDescriptor]:
        """
        Describe one child of a directory, or None if it cannot be described.

        The entry may vanish or change permissions between enumeration and
        this call; such entries are omitted rather than failing the listing.

        Args:
            directory: Resolved parent directory
            name: Child name

        Returns:
            EntryDescriptor, or None on any filesystem error or undecodable name
        """
        try:
            # JSON cannot carry undecodable bytes from the filesystem
            name.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning(f"Failed to get info for entry: {name!r} ({e})")
            return None

        path = os.path.join(directory, name)
        try:
            stats = os.stat(path)
            permissions = self.fs.resolver.resolve(path, stats)
        except OSError as e:
            logger.warning(f"Failed to get info for entry: {name} ({e})")
            return None

        is_directory = stat.S_ISDIR(stats.st_mode)
        created = getattr(stats, "st_birthtime", stats.st_ctime)

        return EntryDescriptor(
            name=name,
            path=path,
            size=0 if is_directory else stats.st_size,
            extension="" if is_directory else os.path.splitext(name)[1].lower(),
            kind=EntryKind.DIRECTORY if is_directory else EntryKind.FILE,
            created_date=format_timestamp(created),
            modified_date=format_timestamp(stats.st_mtime),
            permissions=permissions,
            is_hidden=self.fs.resolver.is_hidden(name),
        )

    async def scan(self, resolved: ResolvedPath) -> list[EntryDescriptor]:
        """
        Describe every immediate child of a directory concurrently.

        Args:
            resolved: Path already accepted by the path guard

        Returns:
            Descriptors in enumeration order, unresolvable entries omitted

        Raises:
            PathNotFoundError: If the directory vanished after validation
            NotDirectoryError: If the path is not a directory
            DirectoryReadError: If the directory cannot be enumerated
        """
        try:
            stats = await self.fs.run_blocking(os.stat, resolved)
        except FileNotFoundError:
            raise PathNotFoundError("Path does not exist or is not readable")
        except OSError as e:
            logger.error(f"Error reading {resolved}: {e}")
            raise DirectoryReadError("Failed to read directory")

        if not stat.S_ISDIR(stats.st_mode):
            raise NotDirectoryError("Path is not a directory")

        try:
            names = await self.fs.run_blocking(os.listdir, resolved)
        except OSError as e:
            logger.error(f"Error enumerating {resolved}: {e}")
            raise DirectoryReadError("Failed to read directory")

        results = await self.fs.map_blocking(self.resolve_entry, resolved, names)
        entries = [entry for entry in results if entry is not None]

        dropped = len(names) - len(entries)
        if dropped:
            logger.debug(f"Omitted {dropped} unresolvable entries from {resolved}")

        return entries

    def assemble(
        self,
        resolved: ResolvedPath,
        entries: list[EntryDescriptor],
        query: ListingQuery,
        started: float,
    ) -> ListingResult:
        """Filter, sort, aggregate and page a scanned entry set."""
        if not query.include_hidden:
            entries = [entry for entry in entries if not entry.is_hidden]

        entries = sort_entries(entries, query.sort_by, query.sort_order)
        summary = summarize(entries)
        items, pagination = paginate(entries, query.page, query.limit)

        logger.info(
            f"Directory listing: {resolved} - {pagination.total} entries, "
            f"{format_bytes(summary.total_size)} in {format_duration(time.perf_counter() - started)}"
        )

        return ListingResult(
            path=resolved,
            items=items,
            pagination=pagination,
            metadata=summary,
        )

    async def list_resolved(
        self,
        resolved: ResolvedPath,
        query: Optional[ListingQuery] = None,
        timeout: Optional[float] = None,
    ) -> ListingResult:
        """
        List a validated directory.

        Args:
            resolved: Path already accepted by the path guard
            query: Pagination, sort and filter options
            timeout: Scan deadline in seconds (settings default if None)

        Returns:
            ListingResult with the requested page and full-set aggregates
        """
        query = query or ListingQuery()
        started = time.perf_counter()

        entries = await self.fs.with_deadline(self.scan(resolved), timeout)
        return self.assemble(resolved, entries, query, started)

    async def list_directory(
        self,
        path: str,
        query: Optional[ListingQuery] = None,
        timeout: Optional[float] = None,
    ) -> ListingResult:
        """
        Validate an untrusted path and list it.

        Validation and the scan share one deadline.

        Args:
            path: Caller-supplied path
            query: Pagination, sort and filter options
            timeout: Deadline in seconds (settings default if None)

        Returns:
            ListingResult
        """
        query = query or ListingQuery()
        started = time.perf_counter()

        async def validate_and_scan() -> tuple[ResolvedPath, list[EntryDescriptor]]:
            resolved = await self.fs.run_blocking(self.fs.guard.validate, path)
            logger.info(
                f"Listing directory: {resolved} (page={query.page}, limit={query.limit}, "
                f"sort_by={query.sort_by.value}, sort_order={query.sort_order.value}, "
                f"include_hidden={query.include_hidden})"
            )
            return resolved, await self.scan(resolved)

        resolved, entries = await self.fs.with_deadline(validate_and_scan(), timeout)
        return self.assemble(resolved, entries, query, started)
