"""Shared plumbing for filesystem-backed services."""

import asyncio
import logging
from concurrent.futures import Executor
from typing import Any, Awaitable, Callable, Optional, TypeVar

from dirlist.config import Settings, get_settings
from dirlist.services.errors import ScanTimeoutError
from dirlist.services.path_guard import PathGuard
from dirlist.services.permissions import PermissionResolver, get_permission_resolver

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FilesystemService:
    """Runs blocking filesystem calls off the event loop."""

    def __init__(
        self,
        executor: Optional[Executor] = None,
        settings: Optional[Settings] = None,
        guard: Optional[PathGuard] = None,
        resolver: Optional[PermissionResolver] = None,
    ):
        """
        Initialize service.

        Args:
            executor: Bounded worker pool for filesystem calls (loop default if None)
            settings: Settings instance (cached settings if None)
            guard: Path guard (built from settings if None)
            resolver: Permission resolver (platform default if None)
        """
        self.settings = settings or get_settings()
        self.executor = executor
        self.guard = guard or PathGuard(
            restricted_paths=self.settings.restricted_paths,
            max_path_length=self.settings.max_path_length,
        )
        self.resolver = resolver or get_permission_resolver()

    async def run_blocking(self, func: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self.executor, func, *args)

    async def map_blocking(self, func: Callable[[str, str], T], directory: str, names: list[str]) -> list[T]:
        """
        Run func(directory, name) for every name on the worker pool.

        At most settings.scan_concurrency calls from one batch are queued on
        the pool at a time.

        Returns:
            Results in the order of names
        """
        semaphore = asyncio.Semaphore(self.settings.scan_concurrency)

        async def bounded(name: str) -> T:
            async with semaphore:
                return await self.run_blocking(func, directory, name)

        return await asyncio.gather(*(bounded(name) for name in names))

    async def with_deadline(self, work: Awaitable[T], timeout: Optional[float]) -> T:
        """
        Await work, cancelling it once the deadline passes.

        Args:
            work: Coroutine to run
            timeout: Seconds allowed (settings.scan_timeout if None, no limit if <= 0)

        Raises:
            ScanTimeoutError: If the deadline is exceeded
        """
        if timeout is None:
            timeout = self.settings.scan_timeout
        if timeout <= 0:
            return await work

        try:
            return await asyncio.wait_for(work, timeout=timeout)
        except asyncio.TimeoutError:
            logger.error(f"Scan exceeded deadline of {timeout:g}s")
            raise ScanTimeoutError(f"Directory scan exceeded {timeout:g} seconds")
