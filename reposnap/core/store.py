"""
In-memory snapshot of extracted file contents.

Content is collected through a ``SnapshotBuilder`` and only becomes visible
to readers once frozen into a ``SnapshotStore``.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, List, Optional


class SnapshotStore(Mapping):
    """Read-only mapping from repository-relative path to decoded text."""

    def __init__(self, contents: Optional[Dict[str, str]] = None):
        self._contents = MappingProxyType(dict(contents or {}))

    def __getitem__(self, path: str) -> str:
        return self._contents[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._contents)

    def __len__(self) -> int:
        return len(self._contents)

    def __repr__(self) -> str:
        return f"SnapshotStore({len(self)} files)"

    @property
    def paths(self) -> List[str]:
        return sorted(self._contents)

    @classmethod
    def empty(cls) -> "SnapshotStore":
        return cls()


class SnapshotBuilder:
    """Write side of the snapshot, owned by a single extraction pass."""

    def __init__(self):
        self._contents: Dict[str, str] = {}

    def put(self, path: str, content: str) -> bool:
        """
        Store content for a path.

        Returns:
            True if an earlier entry for the same path was replaced
        """
        replaced = path in self._contents
        self._contents[path] = content
        return replaced

    def __contains__(self, path: str) -> bool:
        return path in self._contents

    def __len__(self) -> int:
        return len(self._contents)

    def build(self) -> SnapshotStore:
        """Freeze the collected contents into an independent read-only store."""

        return SnapshotStore(self._contents)


__all__ = [
    "SnapshotStore",
    "SnapshotBuilder",
]
