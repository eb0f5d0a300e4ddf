import pytest
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from reposnap.infrastructure.error_handler import VcsError
from reposnap.models import TreeEntry


class FakeVcsClient:
    """
    In-memory stand-in for the git client.

    ``files`` is a list of (path, content) pairs walked in the given order;
    each gets its own object id so duplicate paths stay distinguishable.
    """

    def __init__(self, files: List[Tuple[str, bytes]] = (), fail_on: Optional[str] = None):
        self.entries = [
            TreeEntry(path=path, object_id=f"{index:040x}")
            for index, (path, _) in enumerate(files)
        ]
        self.blobs: Dict[str, bytes] = {
            entry.object_id: content
            for entry, (_, content) in zip(self.entries, files)
        }
        self.fail_on = fail_on
        self.calls: List[str] = []

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail_on == operation:
            raise VcsError(f"simulated {operation} failure")

    def clone(self, remote_url: str, branch_name: str, destination: Path):
        self._maybe_fail("clone")
        Path(destination).mkdir(parents=True)
        (Path(destination) / ".git").mkdir()
        return {"url": remote_url, "branch": branch_name, "path": destination}

    def checkout(self, repository, branch_name: str) -> None:
        self._maybe_fail("checkout")

    def resolve_branch_tip(self, repository, branch_name: str):
        self._maybe_fail("resolve_branch_tip")
        return "tree"

    def walk_tree(self, tree):
        self.calls.append("walk_tree")
        yield from self.entries

    def open_blob(self, repository, object_id: str) -> bytes:
        self._maybe_fail("open_blob")
        return self.blobs[object_id]


@pytest.fixture
def make_vcs():
    """Factory fixture building FakeVcsClient instances."""
    return FakeVcsClient
