"""vidmeta client custom exception hierarchy.

Provides specific exception types for the failure modes of search,
suggestion and mirror resolution. Every error is terminal for the call
that raised it; the only fallback behaviour lives in the mirror scan.

Exception Hierarchy:
    VidmetaException (base)
    ├── ExternalToolFailure
    ├── RemoteQueryFailure
    │   └── MirrorDirectoryError
    ├── NoCandidateSucceeded
    │   └── NoMirrorAvailable
    ├── MissingQuery
    └── VidmetaConfigError
"""

from typing import Any, Optional


class VidmetaException(Exception):
    """Base exception for all vidmeta client errors.

    All vidmeta-specific exceptions inherit from this class to allow
    catching all of them with a single except clause.
    """

    def __init__(self, message: str, context: Optional[dict] = None):
        """Initialize vidmeta exception.

        Args:
            message: Error message
            context: Optional context dictionary for debugging
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        """Return string representation with context."""
        if self.context:
            context_str = "; ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ExternalToolFailure(VidmetaException):
    """Raised when the external search tool cannot run or its result is unusable.

    Attributes:
        command: The executable that was invoked
        returncode: Process exit status, if the process ran at all
        stderr_preview: First 400 characters of stderr
    """

    def __init__(
        self,
        message: str,
        command: Optional[str] = None,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if command:
            context["command"] = command
        if returncode is not None:
            context["returncode"] = returncode
        if stderr:
            context["stderr"] = stderr.strip()[:400]
        super().__init__(message, context)
        self.command = command
        self.returncode = returncode
        self.stderr_preview = stderr.strip()[:400] if stderr else None


class RemoteQueryFailure(VidmetaException):
    """Raised when a single HTTP query fails or returns unparsable content.

    Attributes:
        url: URL that was queried
        status_code: HTTP status code, if a response was received
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if url:
            context["url"] = url[:100]
        if status_code is not None:
            context["status_code"] = status_code
        super().__init__(message, context)
        self.url = url
        self.status_code = status_code


class MirrorDirectoryError(RemoteQueryFailure):
    """Raised when the mirror directory yields no usable instance."""

    pass


class NoCandidateSucceeded(VidmetaException):
    """Raised when every candidate of a ranked resolution failed.

    Attributes:
        attempts: Per-candidate failure records, in the order they were tried
    """

    def __init__(
        self,
        message: str,
        attempts: Optional[list[dict[str, Any]]] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        self.attempts = attempts or []
        context["attempted"] = len(self.attempts)
        super().__init__(message, context)


class NoMirrorAvailable(NoCandidateSucceeded):
    """Raised when every candidate mirror was exhausted without a usable answer."""

    pass


class MissingQuery(VidmetaException):
    """Raised when pagination is requested on a session with no bound query."""

    pass


class VidmetaConfigError(VidmetaException):
    """Raised when configuration cannot be loaded.

    Attributes:
        config_path: Path of the offending configuration file
    """

    def __init__(
        self,
        message: str,
        config_path: Optional[str] = None,
        context: Optional[dict] = None,
    ):
        if context is None:
            context = {}
        if config_path:
            context["config_path"] = config_path
        super().__init__(message, context)
        self.config_path = config_path


__all__ = [
    "VidmetaException",
    "ExternalToolFailure",
    "RemoteQueryFailure",
    "MirrorDirectoryError",
    "NoCandidateSucceeded",
    "NoMirrorAvailable",
    "MissingQuery",
    "VidmetaConfigError",
]
