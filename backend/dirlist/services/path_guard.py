"""Path validation for untrusted input paths."""

import logging
import os
import re
from typing import Iterable, NewType, Optional

from dirlist.config import get_settings
from dirlist.services.errors import (
    AccessDeniedError,
    InvalidInputError,
    PathNotFoundError,
    PathTraversalError,
)

logger = logging.getLogger(__name__)

ResolvedPath = NewType("ResolvedPath", str)

# Both separators count, so "..\\" is caught on POSIX hosts too.
SEGMENT_SPLIT = re.compile(r"[\\/]")


class PathGuard:
    """
    Validates and canonicalizes untrusted paths.

    Rules enforced, in order:
    1. Path must be non-empty and at most max_path_length characters
    2. After normalization no ".." segment may remain
    3. Lowercased path must not contain any restricted path
    4. Path must exist and be readable by this process
    """

    def __init__(
        self,
        restricted_paths: Optional[Iterable[str]] = None,
        max_path_length: Optional[int] = None,
    ):
        """
        Initialize path guard.

        Args:
            restricted_paths: Deny-list entries (defaults to settings)
            max_path_length: Maximum raw path length (defaults to settings)
        """
        settings = get_settings()
        if restricted_paths is None:
            restricted_paths = settings.restricted_paths
        self.restricted_paths = [p.lower() for p in restricted_paths]
        self.max_path_length = max_path_length or settings.max_path_length

    def normalize(self, raw: str) -> str:
        """
        Check length and traversal, returning the normalized path.

        Raises:
            InvalidInputError: If the path is empty or too long
            PathTraversalError: If the normalized path contains ".."
        """
        if not raw or len(raw) > self.max_path_length:
            raise InvalidInputError("Invalid path length")

        if "\x00" in raw:
            raise InvalidInputError("Path contains a null byte")

        normalized = os.path.normpath(raw)
        if ".." in SEGMENT_SPLIT.split(normalized):
            logger.warning(f"Rejected traversal attempt: {raw!r}")
            raise PathTraversalError("Path traversal not allowed")

        return normalized

    def is_restricted(self, normalized: str) -> bool:
        """Coarse substring match against the deny-list."""
        lowered = normalized.lower()
        return any(restricted in lowered for restricted in self.restricted_paths)

    def validate(self, raw: str) -> ResolvedPath:
        """
        Validate a raw path and return its absolute form.

        Args:
            raw: Caller-supplied path

        Returns:
            Absolute, normalized path

        Raises:
            InvalidInputError: If the path is empty or too long
            PathTraversalError: If the path escapes upward
            AccessDeniedError: If the path is restricted
            PathNotFoundError: If the path is missing or unreadable
        """
        normalized = self.normalize(raw)
        absolute = os.path.abspath(normalized)

        # relative input is matched in its absolute form too
        if self.is_restricted(normalized) or self.is_restricted(absolute):
            logger.warning(f"Rejected restricted path: {normalized!r}")
            raise AccessDeniedError("Access to this path is restricted")

        if not os.access(normalized, os.R_OK):
            raise PathNotFoundError("Path does not exist or is not readable")

        return ResolvedPath(absolute)
