"""
Configuration models for reposnap synchronization runs.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, Mapping, Optional, Tuple, Union

from ..infrastructure.error_handler import ConfigurationError


# Property keys read by the host application at startup
REPO_URL_KEY = "repo.url"
BRANCH_NAME_KEY = "branch.name"
LOCAL_PATH_KEY = "local.path"

DEFAULT_SUFFIXES: Tuple[str, ...] = (".kts",)


# Backslash escapes recognised in properties keys and values
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|.)", re.DOTALL)
_WHITESPACE = " \t\f"


def _environment_name(key: str) -> str:
    """Map a dotted property key to its environment variable form."""

    return key.replace(".", "_").replace("-", "_").upper()


def _unescape(value: str) -> str:
    def replace(match: re.Match) -> str:
        escaped = match.group(1)
        if len(escaped) == 5:
            return chr(int(escaped[1:], 16))
        return _ESCAPES.get(escaped, escaped)

    return _ESCAPE_RE.sub(replace, value)


def _logical_lines(text: str) -> Iterator[str]:
    """Join continuation lines (odd number of trailing backslashes)."""

    pending = ""
    for raw in text.splitlines():
        line = raw.lstrip(_WHITESPACE)
        if not pending and (not line or line[0] in "#!"):
            continue

        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2:
            pending += line[:-1]
            continue

        yield pending + line
        pending = ""

    if pending:
        yield pending


def _split_property(line: str) -> Tuple[str, str]:
    index = 0
    while index < len(line):
        char = line[index]
        if char == "\\":
            index += 2
            continue
        if char in "=:" or char in _WHITESPACE:
            break
        index += 1

    rest = line[index:].lstrip(_WHITESPACE)
    if rest and rest[0] in "=:":
        rest = rest[1:].lstrip(_WHITESPACE)
    return _unescape(line[:index]), _unescape(rest)


def load_properties(path: Union[str, Path]) -> Dict[str, str]:
    """
    Parse a Java-style properties file.

    Supports ``#``/``!`` comments, ``=``, ``:`` or whitespace separators,
    backslash line continuations and escapes (``\\t``, ``\\n``, ``\\uXXXX``,
    ``\\:``, ``\\\\``). Values keep trailing whitespace.
    """

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read properties file {path}", e) from e

    properties: Dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_property(line)
        properties[key] = value
    return properties


@dataclass(frozen=True)
class RepositoryConfiguration:
    """Immutable description of the repository to synchronize."""

    remote_url: str
    branch_name: str
    local_path: Path

    def __post_init__(self) -> None:
        if not self.remote_url:
            raise ValueError("Remote repository URL is required")
        if not self.branch_name:
            raise ValueError("Branch name is required")
        if self.local_path is None or not str(self.local_path):
            raise ValueError("Local path is required")
        if Path(self.local_path) == Path("."):
            raise ValueError("Local path must not be the current directory")
        if not isinstance(self.local_path, Path):
            object.__setattr__(self, "local_path", Path(self.local_path))

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> "RepositoryConfiguration":
        """Build a configuration from ``repo.url``, ``branch.name`` and ``local.path``."""

        missing = [
            key for key in (REPO_URL_KEY, BRANCH_NAME_KEY, LOCAL_PATH_KEY)
            if not properties.get(key)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing configuration values: {', '.join(missing)}"
            )

        return cls(
            remote_url=properties[REPO_URL_KEY],
            branch_name=properties[BRANCH_NAME_KEY],
            local_path=Path(properties[LOCAL_PATH_KEY]),
        )

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None
    ) -> "RepositoryConfiguration":
        """Build a configuration from ``REPO_URL``, ``BRANCH_NAME`` and ``LOCAL_PATH``."""

        environ = os.environ if environ is None else environ
        properties = {}
        for key in (REPO_URL_KEY, BRANCH_NAME_KEY, LOCAL_PATH_KEY):
            value = environ.get(_environment_name(key))
            if value:
                properties[key] = value
        return cls.from_properties(properties)


@dataclass
class SyncConfig:
    """
    Options controlling a synchronization run.

    ``fail_on_sync_error`` re-raises the failure after the run is marked
    failed; otherwise the host continues with an empty snapshot.
    """

    suffixes: Tuple[str, ...] = DEFAULT_SUFFIXES
    encoding: str = "utf-8"
    fail_on_sync_error: bool = False
    cleanup_on_failure: bool = True

    def __post_init__(self) -> None:
        if isinstance(self.suffixes, str):
            self.suffixes = (self.suffixes,)
        else:
            self.suffixes = tuple(self.suffixes)
        if not self.encoding:
            raise ValueError("encoding is required")


__all__ = [
    "REPO_URL_KEY",
    "BRANCH_NAME_KEY",
    "LOCAL_PATH_KEY",
    "DEFAULT_SUFFIXES",
    "load_properties",
    "RepositoryConfiguration",
    "SyncConfig",
]
