"""
Unit tests for the RepositorySynchronizer API.
"""

import logging
import pytest
from unittest.mock import patch

from reposnap.interfaces.api import RepositorySynchronizer
from reposnap.infrastructure.error_handler import ConfigurationError
from reposnap.models import RepositoryConfiguration, SyncConfig, SyncState
from reposnap.services import GitClient


@pytest.fixture
def repository(tmp_path):
    return RepositoryConfiguration(
        remote_url="https://example.com/scripts.git",
        branch_name="main",
        local_path=tmp_path / "checkout",
    )


class TestRepositorySynchronizer:

    def test_defaults_to_git_client(self, repository):
        synchronizer = RepositorySynchronizer(repository)
        assert isinstance(synchronizer.vcs_client, GitClient)
        assert synchronizer.verbose is False
        assert synchronizer.state == SyncState.IDLE
        assert synchronizer.store is None
        assert synchronizer.get_content("a.kts", "fallback") == "fallback"

    def test_synchronize_exposes_store(self, make_vcs, repository):
        vcs = make_vcs([("scripts/a.kts", b"echo hello"), ("notes.txt", b"n")])
        synchronizer = RepositorySynchronizer(repository, vcs_client=vcs)

        result = synchronizer.synchronize()

        assert result.is_successful
        assert synchronizer.state == SyncState.READY
        assert synchronizer.result is result
        assert synchronizer.get_content("scripts/a.kts") == "echo hello"
        assert synchronizer.get_content("notes.txt") is None

    def test_failed_run_leaves_empty_store(self, make_vcs, repository):
        synchronizer = RepositorySynchronizer(repository, vcs_client=make_vcs(fail_on="clone"))

        result = synchronizer.synchronize()

        assert result.state == SyncState.FAILED
        assert synchronizer.store is not None
        assert len(synchronizer.store) == 0

    def test_custom_suffixes(self, make_vcs, repository):
        vcs = make_vcs([("a.kts", b"a"), ("b.groovy", b"b")])
        synchronizer = RepositorySynchronizer(
            repository, config=SyncConfig(suffixes=(".groovy",)), vcs_client=vcs
        )

        synchronizer.synchronize()

        assert list(synchronizer.store) == ["b.groovy"]

    def test_from_properties_mapping(self, make_vcs, tmp_path):
        synchronizer = RepositorySynchronizer.from_properties(
            {
                "repo.url": "https://example.com/scripts.git",
                "branch.name": "main",
                "local.path": str(tmp_path / "checkout"),
            },
            vcs_client=make_vcs(),
        )
        assert synchronizer.repository.branch_name == "main"
        assert synchronizer.repository.local_path == tmp_path / "checkout"

    def test_from_properties_file(self, tmp_path):
        path = tmp_path / "application.properties"
        path.write_text(
            "repo.url=https://example.com/scripts.git\n"
            "branch.name=dev\n"
            f"local.path={tmp_path / 'checkout'}\n"
        )
        synchronizer = RepositorySynchronizer.from_properties(path)
        assert synchronizer.repository.branch_name == "dev"

    def test_from_properties_missing_values(self):
        with pytest.raises(ConfigurationError):
            RepositorySynchronizer.from_properties({"repo.url": "x"})


class TestVerboseLogging:
    """Test cases for verbose logging functionality."""

    @patch('reposnap.interfaces.api.logger')
    def test_logger_level_verbose_true(self, mock_logger, repository):
        RepositorySynchronizer(repository, verbose=True)
        mock_logger.setLevel.assert_called_with(logging.DEBUG)

    @patch('reposnap.interfaces.api.logger')
    def test_logger_level_verbose_false(self, mock_logger, repository):
        RepositorySynchronizer(repository, verbose=False)
        mock_logger.setLevel.assert_called_with(logging.INFO)

    @patch('reposnap.interfaces.api.logger')
    def test_set_verbose_toggle(self, mock_logger, repository):
        synchronizer = RepositorySynchronizer(repository)
        synchronizer.set_verbose(True)

        assert synchronizer.verbose is True
        assert mock_logger.setLevel.call_count >= 2
        mock_logger.setLevel.assert_called_with(logging.DEBUG)

        synchronizer.set_verbose(False)
        assert synchronizer.verbose is False
        mock_logger.setLevel.assert_called_with(logging.INFO)
