"""
reposnap: clone a branch at startup and keep its scripts in memory.
"""

from .core import SnapshotStore, SyncOrchestrator, reset_workspace
from .infrastructure.error_handler import (
    SyncError,
    ConfigurationError,
    WorkspaceError,
    VcsError,
    DecodeError,
)
from .interfaces.api import RepositorySynchronizer
from .models import (
    RepositoryConfiguration,
    SyncConfig,
    SyncResult,
    SyncState,
    FilterCriteria,
    TreeEntry,
)
from .services import GitClient, VcsClient

__version__ = "0.1.0"

__all__ = [
    "RepositorySynchronizer",
    "SyncOrchestrator",
    "SnapshotStore",
    "reset_workspace",
    "GitClient",
    "VcsClient",
    "RepositoryConfiguration",
    "SyncConfig",
    "SyncResult",
    "SyncState",
    "FilterCriteria",
    "TreeEntry",
    "SyncError",
    "ConfigurationError",
    "WorkspaceError",
    "VcsError",
    "DecodeError",
]
