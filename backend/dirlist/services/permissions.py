"""Platform-specific permission and ownership resolution."""

import logging
import os
from abc import ABC, abstractmethod
from functools import lru_cache

from dirlist.models.entry import EntryPermissions, Permissions

logger = logging.getLogger(__name__)


class PermissionResolver(ABC):
    """Resolves access probes, ownership and hidden-ness for a path."""

    name = "base"

    def probe(self, path: str) -> Permissions:
        """
        Run the read/write/execute access probes.

        Args:
            path: Path to probe

        Returns:
            Permissions for the invoking process
        """
        return Permissions(
            readable=os.access(path, os.R_OK),
            writable=os.access(path, os.W_OK),
            executable=os.access(path, os.X_OK),
        )

    def resolve(self, path: str, stats: os.stat_result) -> EntryPermissions:
        """
        Build the full permission record for a stat'ed path.

        Args:
            path: Path to probe
            stats: Result of os.stat(path)

        Returns:
            EntryPermissions with probes, owner, group and raw mode
        """
        access = self.probe(path)
        owner, group = self.ownership(stats)
        return EntryPermissions(
            readable=access.readable,
            writable=access.writable,
            executable=access.executable,
            owner=owner,
            group=group,
            mode=format(stats.st_mode, "o"),
        )

    @abstractmethod
    def ownership(self, stats: os.stat_result) -> tuple[str, str]:
        """Return (owner, group) names for a stat result."""

    @abstractmethod
    def is_hidden(self, name: str) -> bool:
        """Whether an entry with this name is hidden."""


class PosixPermissionResolver(PermissionResolver):
    """uid/gid lookups through the pwd and grp databases."""

    name = "posix"

    def ownership(self, stats: os.stat_result) -> tuple[str, str]:
        import grp
        import pwd

        try:
            owner = pwd.getpwuid(stats.st_uid).pw_name
        except KeyError:
            owner = str(stats.st_uid)

        try:
            group = grp.getgrgid(stats.st_gid).gr_name
        except KeyError:
            group = str(stats.st_gid)

        return owner, group

    def is_hidden(self, name: str) -> bool:
        return name.startswith(".")


class WindowsPermissionResolver(PermissionResolver):
    """No uid/gid on Windows; ownership is reported as unknown."""

    name = "windows"

    def ownership(self, stats: os.stat_result) -> tuple[str, str]:
        return "unknown", "unknown"

    def is_hidden(self, name: str) -> bool:
        return name.startswith(".") or name.startswith("$")


@lru_cache()
def get_permission_resolver() -> PermissionResolver:
    """Get the resolver for this platform, chosen once per process."""
    resolver = WindowsPermissionResolver() if os.name == "nt" else PosixPermissionResolver()
    logger.info(f"Using {resolver.name} permission resolver")
    return resolver
