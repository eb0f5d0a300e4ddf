"""
Synchronization domain models for reposnap.

This module contains the data classes and enums describing tree entries,
selection criteria, run states and run results.
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from ..core.store import SnapshotStore


class SyncState(Enum):
    """Lifecycle states of a synchronization run."""

    IDLE = "idle"
    RESETTING = "resetting"
    ACQUIRING = "acquiring"
    CHECKED_OUT = "checked_out"
    EXTRACTING = "extracting"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class TreeEntry:
    """A file found while walking a tree: its repository path and blob id."""

    path: str
    object_id: str


@dataclass
class FilterCriteria:
    """Selection criteria for tree entries."""

    suffixes: Tuple[str, ...] = ()
    include_patterns: List[str] = field(default_factory=list)
    exclude_patterns: List[str] = field(default_factory=list)

    def matches_path(self, path: str) -> bool:
        """Check if a given path matches the filter criteria."""

        if self.suffixes and not path.endswith(tuple(self.suffixes)):
            return False

        if self.include_patterns:
            if not any(fnmatch.fnmatch(path, pattern) for pattern in self.include_patterns):
                return False

        if self.exclude_patterns:
            if any(fnmatch.fnmatch(path, pattern) for pattern in self.exclude_patterns):
                return False

        return True


@dataclass
class SyncResult:
    """Terminal outcome of a synchronization run."""

    state: SyncState
    store: "SnapshotStore"
    extracted_files: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    started_at: datetime = field(default_factory=datetime.now)
    completed_at: Optional[datetime] = None

    @property
    def is_successful(self) -> bool:
        return self.state == SyncState.READY and self.error is None

    @property
    def error_message(self) -> Optional[str]:
        return str(self.error) if self.error is not None else None

    @property
    def duration_seconds(self) -> float:
        if self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        return 0.0


__all__ = [
    "SyncState",
    "TreeEntry",
    "FilterCriteria",
    "SyncResult",
]
