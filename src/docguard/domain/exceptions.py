"""
Domain exceptions for documentation validation.

These represent user or configuration errors, reported to the caller
rather than surfacing as crashes.
"""


class DocGuardError(Exception):
    """Base class for all DocGuard errors."""


class NotFoundError(DocGuardError):
    """Raised when a required path does not exist."""

    def __init__(self, message: str, path: str):
        """
        Args:
            message: Human-readable error message
            path: The path that could not be found
        """
        super().__init__(message)
        self.path = path


class DocsRootNotFound(NotFoundError):
    """
    Raised when the document root is missing or is not a directory.

    This is fatal for a run: no principle can be evaluated without a root.
    """

    def __init__(self, path: str):
        super().__init__(f"Documentation directory not found: {path}", path)


class ConfigurationError(DocGuardError):
    """Raised when settings files or options are invalid."""

    pass
