"""
Python API for host applications.

Provides ``RepositorySynchronizer``, which wires the git client and the
orchestrator together and exposes the resulting snapshot.
"""

import logging
from pathlib import Path
from typing import Mapping, Optional, Union

from ..core import SnapshotStore, SyncOrchestrator
from ..infrastructure.logger import logger
from ..models import (
    RepositoryConfiguration, SyncConfig, SyncResult, SyncState, load_properties
)
from ..services import GitClient, VcsClient


class RepositorySynchronizer:
    """
    Startup entry point: call ``synchronize()`` once, then read scripts
    from ``store``.

    Example:
        >>> synchronizer = RepositorySynchronizer.from_properties("application.properties")
        >>> result = synchronizer.synchronize()
        >>> if result.is_successful:
        ...     print(synchronizer.get_content("scripts/build.kts"))
    """

    def __init__(
        self,
        repository: RepositoryConfiguration,
        config: Optional[SyncConfig] = None,
        vcs_client: Optional[VcsClient] = None,
        verbose: bool = False
    ):
        self.repository = repository
        self.config = config or SyncConfig()
        self.vcs_client = vcs_client or GitClient()
        self.orchestrator = SyncOrchestrator(self.vcs_client, repository, self.config)
        self.set_verbose(verbose)

    @classmethod
    def from_properties(
        cls,
        source: Union[str, Path, Mapping[str, str]],
        **kwargs
    ) -> "RepositorySynchronizer":
        """Create a synchronizer from a properties file path or mapping."""

        properties = source if isinstance(source, Mapping) else load_properties(source)
        return cls(RepositoryConfiguration.from_properties(properties), **kwargs)

    def set_verbose(self, verbose: bool) -> None:
        """Switch package logging between DEBUG and INFO."""

        self.verbose = verbose
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    def synchronize(self) -> SyncResult:
        return self.orchestrator.synchronize()

    @property
    def state(self) -> SyncState:
        return self.orchestrator.state

    @property
    def result(self) -> Optional[SyncResult]:
        return self.orchestrator.result

    @property
    def store(self) -> Optional[SnapshotStore]:
        """The snapshot after a run; empty if the run failed, None before it."""

        result = self.orchestrator.result
        return result.store if result is not None else None

    def get_content(self, path: str, default: Optional[str] = None) -> Optional[str]:
        store = self.store
        if store is None:
            return default
        return store.get(path, default)


__all__ = [
    "RepositorySynchronizer",
]
