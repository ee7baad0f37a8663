"""Data classes for git-repo-name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class RemoteKind(Enum):
    GITHUB = "github"
    FILE = "file"
    OTHER = "other"  # recognised host without a rename provider


class Source(Enum):
    REMOTE = "remote"
    LOCAL = "local"


class Direction(Enum):
    NOOP = "noop"
    RENAME_LOCAL = "rename_local"
    RENAME_REMOTE = "rename_remote"


@dataclass(frozen=True)
class RemoteReference:
    repository_name: str
    kind: RemoteKind
    host: str | None = None
    owner: str | None = None
    raw_url: str = ""


@dataclass(frozen=True)
class SyncAction:
    direction: Direction
    from_name: str | None = None
    to_name: str | None = None
    dry_run: bool = False


@dataclass
class SyncContext:
    source_of_truth: Source
    remote_name: str
    local_directory_path: Path
    dry_run: bool = False


@dataclass
class RemoteRepository:
    """Repository metadata as reported by a provider."""

    name: str
    owner: str | None = None


@dataclass
class SyncOutcome:
    action: SyncAction
    new_directory: Path | None = None
    new_remote_url: str | None = None
