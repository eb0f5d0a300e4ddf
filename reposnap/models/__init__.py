"""
Core data models API surface for reposnap.

Re-exports model classes so callers can import them as
`from reposnap.models import X`.
"""

from .config import (
    REPO_URL_KEY,
    BRANCH_NAME_KEY,
    LOCAL_PATH_KEY,
    DEFAULT_SUFFIXES,
    load_properties,
    RepositoryConfiguration,
    SyncConfig,
)
from .sync import (
    SyncState,
    TreeEntry,
    FilterCriteria,
    SyncResult,
)

__all__ = [
    # Config models
    "REPO_URL_KEY",
    "BRANCH_NAME_KEY",
    "LOCAL_PATH_KEY",
    "DEFAULT_SUFFIXES",
    "load_properties",
    "RepositoryConfiguration",
    "SyncConfig",
    # Sync models
    "SyncState",
    "TreeEntry",
    "FilterCriteria",
    "SyncResult",
]
