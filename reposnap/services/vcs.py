"""
Version control client used by the synchronizer.

``VcsClient`` is the capability the core depends on; ``GitClient`` is the
GitPython-backed implementation used in production.
"""

from pathlib import Path
from typing import Any, Iterator, Protocol, runtime_checkable

import git

from ..infrastructure.error_handler import VCS_EXCEPTIONS, VcsError, handle_vcs_error
from ..infrastructure.logger import logger
from ..models import TreeEntry


@runtime_checkable
class VcsClient(Protocol):
    """Operations the synchronizer needs from a version control backend."""

    def clone(self, remote_url: str, branch_name: str, destination: Path) -> Any:
        """Clone ``remote_url`` into ``destination`` and return a repository handle."""
        ...

    def checkout(self, repository: Any, branch_name: str) -> None:
        """Check out ``branch_name`` in the cloned repository."""
        ...

    def resolve_branch_tip(self, repository: Any, branch_name: str) -> Any:
        """Return the tree of the commit ``branch_name`` points at."""
        ...

    def walk_tree(self, tree: Any) -> Iterator[TreeEntry]:
        """Yield every file entry of ``tree`` recursively, depth-first."""
        ...

    def open_blob(self, repository: Any, object_id: str) -> bytes:
        """Return the raw content of the blob ``object_id``."""
        ...


class GitClient:
    """``VcsClient`` implementation on top of GitPython."""

    @handle_vcs_error
    def clone(self, remote_url: str, branch_name: str, destination: Path) -> git.Repo:
        logger.debug(f"Cloning {remote_url}@{branch_name} into {destination}")
        repository = git.Repo.clone_from(remote_url, str(destination), branch=branch_name)
        logger.debug(
            f"Cloned {remote_url}, remotes: {', '.join(r.name for r in repository.remotes)}"
        )
        return repository

    @handle_vcs_error
    def checkout(self, repository: git.Repo, branch_name: str) -> None:
        repository.git.checkout(branch_name)
        logger.debug(f"Checked out {branch_name} at {repository.head.commit.hexsha}")

    @handle_vcs_error
    def resolve_branch_tip(self, repository: git.Repo, branch_name: str) -> git.Tree:
        return repository.commit(branch_name).tree

    def walk_tree(self, tree: git.Tree) -> Iterator[TreeEntry]:
        try:
            yield from self._walk(tree)
        except VCS_EXCEPTIONS as e:
            raise VcsError(f"Failed to walk tree {tree.hexsha}", e) from e

    def _walk(self, tree: git.Tree) -> Iterator[TreeEntry]:
        # Submodule entries are commits in another repository and are skipped
        for item in tree:
            if item.type == "tree":
                yield from self._walk(item)
            elif item.type == "blob":
                yield TreeEntry(path=item.path, object_id=item.hexsha)

    @handle_vcs_error
    def open_blob(self, repository: git.Repo, object_id: str) -> bytes:
        return repository.odb.stream(bytes.fromhex(object_id)).read()


__all__ = [
    "VcsClient",
    "GitClient",
]
