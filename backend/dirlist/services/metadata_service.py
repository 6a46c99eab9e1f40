"""Single-path metadata probe."""

import logging
import os
import stat
from typing import Optional

from dirlist.models.response import DirectoryMetadata
from dirlist.services.base import FilesystemService
from dirlist.services.errors import PathNotFoundError
from dirlist.services.path_guard import ResolvedPath
from dirlist.utils.formatters import format_bytes, format_timestamp

logger = logging.getLogger(__name__)


def file_size(directory: str, name: str) -> int:
    """Size of a regular file child, 0 for anything else or on error."""
    try:
        stats = os.stat(os.path.join(directory, name))
    except OSError:
        return 0
    return stats.st_size if stat.S_ISREG(stats.st_mode) else 0


class MetadataService:
    """Service for lightweight path metadata."""

    def __init__(self, fs: FilesystemService):
        """
        Initialize metadata service.

        Args:
            fs: Filesystem service providing guard, resolver and worker pool
        """
        self.fs = fs

    async def describe(self, path: str, timeout: Optional[float] = None) -> DirectoryMetadata:
        """
        Describe a path without listing it.

        A missing or unreadable path yields a descriptor with exists=False
        instead of an error. Traversal, restricted and malformed paths still
        raise.

        Args:
            path: Caller-supplied path
            timeout: Deadline in seconds covering validation and the stat calls
                (settings default if None)

        Returns:
            DirectoryMetadata
        """
        return await self.fs.with_deadline(self._describe(path), timeout)

    async def _describe(self, path: str) -> DirectoryMetadata:
        try:
            resolved = await self.fs.run_blocking(self.fs.guard.validate, path)
        except PathNotFoundError:
            logger.info(f"Metadata probe: {path} does not exist")
            return DirectoryMetadata.absent(os.path.abspath(path))

        return await self._inspect(resolved)

    async def _inspect(self, resolved: ResolvedPath) -> DirectoryMetadata:
        try:
            stats = await self.fs.run_blocking(os.stat, resolved)
        except FileNotFoundError:
            return DirectoryMetadata.absent(resolved)

        permissions = await self.fs.run_blocking(self.fs.resolver.probe, resolved)
        is_directory = stat.S_ISDIR(stats.st_mode)

        total_items = 0
        total_size = 0
        if is_directory:
            try:
                names = await self.fs.run_blocking(os.listdir, resolved)
            except OSError as e:
                logger.warning(f"Could not enumerate {resolved}: {e}")
                names = []

            total_items = len(names)
            sizes = await self.fs.map_blocking(file_size, resolved, names)
            total_size = sum(sizes)

        created = getattr(stats, "st_birthtime", stats.st_ctime)
        logger.info(f"Metadata probe: {resolved} - {total_items} items, {format_bytes(total_size)}")

        return DirectoryMetadata(
            path=resolved,
            exists=True,
            is_directory=is_directory,
            permissions=permissions,
            total_items=total_items,
            total_size=total_size,
            last_accessed=format_timestamp(stats.st_atime),
            last_modified=format_timestamp(stats.st_mtime),
            created=format_timestamp(created),
        )
