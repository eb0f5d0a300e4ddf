"""
Local workspace reset performed before every clone.
"""

import os
import stat
from pathlib import Path
from typing import List, Union

from ..infrastructure.error_handler import WorkspaceError
from ..infrastructure.logger import logger


def _unlink(path: Path) -> None:
    """Unlink a file, clearing a read-only flag and retrying once if needed."""

    try:
        os.unlink(path)
    except PermissionError:
        if path.is_symlink():
            raise
        # git leaves object files read-only, which blocks unlink on Windows
        os.chmod(path, stat.S_IWUSR | stat.S_IRUSR)
        os.unlink(path)


def _remove(path: Path, removed: List[Path]) -> None:
    """Delete ``path`` depth-first: children first, then the emptied directory."""

    if path.is_dir() and not path.is_symlink():
        with os.scandir(path) as entries:
            children = [Path(entry.path) for entry in entries]
        for child in children:
            _remove(child, removed)
        os.rmdir(path)
    else:
        _unlink(path)
    removed.append(path)


def reset_workspace(path: Union[str, Path]) -> List[Path]:
    """
    Remove everything at ``path`` so a fresh clone can be made there.

    After a successful return the path does not exist. Calling it on a
    missing path is a no-op.

    Args:
        path: Local working copy location

    Returns:
        Removed paths in deletion order

    Raises:
        WorkspaceError: If any entry cannot be removed
    """
    path = Path(path)
    removed: List[Path] = []

    if not path.exists() and not path.is_symlink():
        logger.debug(f"Workspace {path} does not exist, nothing to reset")
        return removed

    try:
        _remove(path, removed)
    except OSError as e:
        failed = Path(e.filename) if e.filename else path
        raise WorkspaceError(f"Failed to reset workspace at {failed}", e) from e

    logger.debug(f"Reset workspace {path}: removed {len(removed)} entries")
    return removed


__all__ = [
    "reset_workspace",
]
