"""Directory service errors."""


class DirectoryServiceError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(DirectoryServiceError):
    """Raised when a path or parameter is malformed."""

    status_code = 400


class PathTraversalError(DirectoryServiceError):
    """Raised when a normalized path still escapes upward."""

    status_code = 403


class AccessDeniedError(DirectoryServiceError):
    """Raised when a path touches a restricted location."""

    status_code = 403


class PathNotFoundError(DirectoryServiceError):
    """Raised when a path does not exist or is not readable."""

    status_code = 404


class NotDirectoryError(DirectoryServiceError):
    """Raised when a listing targets something other than a directory."""

    status_code = 400


class DirectoryReadError(DirectoryServiceError):
    """Raised when enumerating the directory itself fails."""

    status_code = 500


class ScanTimeoutError(DirectoryServiceError):
    """Raised when a scan exceeds its deadline."""

    status_code = 504
