"""
Custom exceptions for playsplash operations.

Every failure in the launch sequence is one of these. Helpers raise them with
a contextual message; the CLI is the single place that decides to exit.
"""


class PlaySplashError(Exception):
    """Base exception for all playsplash errors."""

    pass


class ResourceError(PlaySplashError):
    """Raised when something the launch needs is not available."""

    pass


class DependencyNotFoundError(ResourceError):
    """Raised when the media player is not on the executable search path."""

    pass


class UserContextError(ResourceError):
    """Raised when the current OS user or home directory cannot be resolved."""

    pass


class OperationError(PlaySplashError):
    """Raised when an operation fails."""

    pass


class LogFileError(OperationError):
    """Raised when the log file cannot be opened."""

    pass


class AssetExtractionError(OperationError):
    """Raised when the splash video cannot be written to a temporary file."""

    pass


class ProcessLaunchError(OperationError):
    """Raised when an external process cannot be started."""

    pass
