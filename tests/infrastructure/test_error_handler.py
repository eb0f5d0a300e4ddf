import pytest

from git.exc import BadName, GitCommandError

from reposnap.infrastructure.error_handler import (
    SyncError,
    ConfigurationError,
    WorkspaceError,
    VcsError,
    DecodeError,
    handle_vcs_error,
)


# ---- Exception classes -----------------------------------------------------

def test_sync_error_message_and_original():
    original = ValueError("boom")
    err = SyncError("failed", original)
    assert err.message == "failed"
    assert err.original_error is original
    assert "failed" in str(err)
    assert "Original: boom" in str(err)


@pytest.mark.parametrize("exc_cls", [ConfigurationError, WorkspaceError, VcsError])
def test_specific_errors_store_message(exc_cls):
    err = exc_cls("msg")
    assert err.message == "msg"
    assert str(err) == "msg"
    assert isinstance(err, SyncError)


def test_decode_error_carries_path():
    err = DecodeError("scripts/a.kts")
    assert err.path == "scripts/a.kts"
    assert err.encoding == "utf-8"
    assert str(err) == "Cannot decode scripts/a.kts as utf-8"


# ---- handle_vcs_error decorator -------------------------------------------

def test_handle_vcs_error_git_command_failure():
    @handle_vcs_error
    def clone():
        raise GitCommandError(["git", "clone"], 128, stderr="could not resolve host")

    with pytest.raises(VcsError) as exc_info:
        clone()

    assert isinstance(exc_info.value.original_error, GitCommandError)
    assert "clone" in exc_info.value.message


def test_handle_vcs_error_bad_name():
    @handle_vcs_error
    def resolve_branch_tip():
        raise BadName("missing-branch")

    with pytest.raises(VcsError):
        resolve_branch_tip()


@pytest.mark.parametrize("exc", [ValueError("bad ref"), OSError("disk")])
def test_handle_vcs_error_value_and_os_errors(exc):
    @handle_vcs_error
    def fn():
        raise exc

    with pytest.raises(VcsError):
        fn()


def test_handle_vcs_error_passes_sync_errors_through():
    original = WorkspaceError("locked")

    @handle_vcs_error
    def fn():
        raise original

    with pytest.raises(WorkspaceError) as exc_info:
        fn()
    assert exc_info.value is original


def test_handle_vcs_error_does_not_wrap_unrelated_errors():
    @handle_vcs_error
    def fn():
        raise KeyError("nope")

    with pytest.raises(KeyError):
        fn()


def test_handle_vcs_error_returns_value():
    @handle_vcs_error
    def fn(value):
        return value * 2

    assert fn(21) == 42
    assert fn.__name__ == "fn"
