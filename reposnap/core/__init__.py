from .store import SnapshotStore, SnapshotBuilder
from .workspace import reset_workspace
from .filter import FilterEngine
from .extractor import TreeExtractor
from .orchestrator import SyncOrchestrator

__all__ = [
    "SnapshotStore",
    "SnapshotBuilder",
    "reset_workspace",
    "FilterEngine",
    "TreeExtractor",
    "SyncOrchestrator",
]
