"""
Error taxonomy for repository synchronization and the decorator that
translates git library failures into it.
"""

import functools
from typing import Any, Callable, Optional, TypeVar

from git.exc import BadName, BadObject, GitError

from .logger import logger


F = TypeVar("F", bound=Callable[..., Any])

# Failures raised by GitPython and its gitdb object database
VCS_EXCEPTIONS = (GitError, BadName, BadObject, ValueError, OSError)


####
##      EXCEPTIONS
#####
class SyncError(Exception):
    """Base exception for every synchronization failure."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(message)

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (Original: {self.original_error})"
        return self.message


class ConfigurationError(SyncError):
    """Raised when required configuration values are missing or invalid."""


class WorkspaceError(SyncError):
    """Raised when the local working directory cannot be reset."""


class VcsError(SyncError):
    """Raised when cloning, checkout or object resolution fails."""


class DecodeError(SyncError):
    """Raised when a selected blob is not valid text in the expected encoding."""

    def __init__(
        self,
        path: str,
        encoding: str = "utf-8",
        original_error: Optional[Exception] = None
    ):
        self.path = path
        self.encoding = encoding
        super().__init__(f"Cannot decode {path} as {encoding}", original_error)


####
##      DECORATORS
#####
def handle_vcs_error(func: F) -> F:
    """
    Translate git library exceptions raised by ``func`` into ``VcsError``.

    ``SyncError`` instances pass through untouched so callers keep the most
    specific failure.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SyncError:
            raise
        except VCS_EXCEPTIONS as e:
            logger.debug(f"{func.__name__} failed: {e}")
            raise VcsError(f"Git operation '{func.__name__}' failed", e) from e

    return wrapper  # type: ignore[return-value]


__all__ = [
    "SyncError",
    "ConfigurationError",
    "WorkspaceError",
    "VcsError",
    "DecodeError",
    "VCS_EXCEPTIONS",
    "handle_vcs_error",
]
