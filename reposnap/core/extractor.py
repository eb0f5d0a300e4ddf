"""
Extraction of selected blobs from a checked-out tree into a snapshot.
"""

from typing import Any, List

from ..infrastructure.error_handler import DecodeError
from ..infrastructure.logger import logger
from ..services import VcsClient
from .filter import FilterEngine
from .store import SnapshotBuilder


class TreeExtractor:
    """
    Walks a tree and writes the decoded content of every matching blob
    into a ``SnapshotBuilder``.
    """

    def __init__(
        self,
        vcs_client: VcsClient,
        filter_engine: FilterEngine,
        encoding: str = "utf-8"
    ):
        self.vcs_client = vcs_client
        self.filter_engine = filter_engine
        self.encoding = encoding

    def extract(self, repository: Any, tree: Any, builder: SnapshotBuilder) -> List[str]:
        """
        Extract every matching entry of ``tree``.

        A path seen twice keeps the content of the later entry in traversal
        order. Entries written before a failure stay in ``builder``.

        Args:
            repository: Handle returned by the VCS client's clone
            tree: Tree handle of the branch tip
            builder: Snapshot being populated

        Returns:
            Extracted paths in traversal order

        Raises:
            VcsError: If a blob cannot be read
            DecodeError: If a blob is not valid text
        """
        extracted: List[str] = []

        for entry in self.filter_engine.select(self.vcs_client.walk_tree(tree)):
            data = self.vcs_client.open_blob(repository, entry.object_id)
            try:
                content = data.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise DecodeError(entry.path, self.encoding, e) from e

            if builder.put(entry.path, content):
                logger.debug(f"Duplicate path {entry.path}, keeping later entry {entry.object_id}")
            else:
                logger.debug(f"Extracted {entry.path} ({len(data)} bytes)")
            extracted.append(entry.path)

        return extracted


__all__ = [
    "TreeExtractor",
]
