"""
Orchestrator for the one-shot synchronize-then-extract pipeline.
"""

from datetime import datetime
from typing import List, Optional

from ..infrastructure.error_handler import SyncError, WorkspaceError
from ..infrastructure.logger import logger
from ..models import RepositoryConfiguration, SyncConfig, SyncResult, SyncState
from ..services import VcsClient
from .extractor import TreeExtractor
from .filter import FilterEngine
from .store import SnapshotBuilder, SnapshotStore
from .workspace import reset_workspace


####
##      SYNC ORCHESTRATOR
#####
class SyncOrchestrator:
    """
    Resets the workspace, clones and checks out the branch, then extracts
    matching files into a snapshot.

    Each instance runs at most once. The snapshot is published through the
    returned ``SyncResult`` only when the run reaches ``READY``.
    """

    def __init__(
        self,
        vcs_client: VcsClient,
        repository: RepositoryConfiguration,
        config: Optional[SyncConfig] = None,
        filter_engine: Optional[FilterEngine] = None
    ):
        self.vcs_client = vcs_client
        self.repository = repository
        self.config = config or SyncConfig()
        self.filter_engine = filter_engine or FilterEngine.for_suffixes(self.config.suffixes)
        self._state = SyncState.IDLE
        self._result: Optional[SyncResult] = None

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def result(self) -> Optional[SyncResult]:
        return self._result

    def _transition(self, state: SyncState) -> None:
        logger.debug(f"Synchronization state {self._state.value} -> {state.value}")
        self._state = state

    def synchronize(self) -> SyncResult:
        """
        Run the pipeline once.

        Returns:
            SyncResult in state READY with the complete snapshot, or FAILED
            with an empty snapshot and the cause

        Raises:
            RuntimeError: If this orchestrator has already run
            SyncError: If the run fails and ``fail_on_sync_error`` is set
        """
        if self._state != SyncState.IDLE:
            raise RuntimeError("Synchronization has already run for this orchestrator")

        repo = self.repository
        logger.info(f"Synchronizing {repo.remote_url}@{repo.branch_name} into {repo.local_path}")
        started_at = datetime.now()
        builder = SnapshotBuilder()
        extracted: List[str] = []

        try:
            self._transition(SyncState.RESETTING)
            reset_workspace(repo.local_path)

            self._transition(SyncState.ACQUIRING)
            handle = self.vcs_client.clone(repo.remote_url, repo.branch_name, repo.local_path)
            self.vcs_client.checkout(handle, repo.branch_name)
            self._transition(SyncState.CHECKED_OUT)

            self._transition(SyncState.EXTRACTING)
            tree = self.vcs_client.resolve_branch_tip(handle, repo.branch_name)
            extractor = TreeExtractor(self.vcs_client, self.filter_engine, self.config.encoding)
            extracted = extractor.extract(handle, tree, builder)

            store = builder.build()
            self._transition(SyncState.READY)

        except Exception as e:
            error = e if isinstance(e, SyncError) else SyncError(
                f"Unexpected synchronization failure: {e}", e
            )
            return self._fail(error, started_at)

        self._result = SyncResult(
            state=SyncState.READY,
            store=store,
            extracted_files=extracted,
            started_at=started_at,
            completed_at=datetime.now()
        )
        logger.info(f"Synchronization ready: {len(store)} files extracted")
        for path in extracted:
            logger.debug(f"  {path}")
        return self._result

    def _fail(self, error: SyncError, started_at: datetime) -> SyncResult:
        failed_in = self._state
        self._transition(SyncState.FAILED)
        logger.error(f"Synchronization failed while {failed_in.value}: {error}")

        if self.config.cleanup_on_failure and failed_in not in (SyncState.IDLE, SyncState.RESETTING):
            try:
                reset_workspace(self.repository.local_path)
            except WorkspaceError as cleanup_error:
                logger.warning(f"Could not clean up working copy after failure: {cleanup_error}")

        self._result = SyncResult(
            state=SyncState.FAILED,
            store=SnapshotStore.empty(),
            error=error,
            started_at=started_at,
            completed_at=datetime.now()
        )

        if self.config.fail_on_sync_error:
            raise error
        return self._result


__all__ = [
    "SyncOrchestrator",
]
