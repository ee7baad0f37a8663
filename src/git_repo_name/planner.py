"""Decide which side of a repository gets renamed."""

from __future__ import annotations

from git_repo_name.errors import InvalidSourceError, UnsupportedRemoteError
from git_repo_name.models import (
    Direction,
    RemoteKind,
    RemoteReference,
    Source,
    SyncAction,
)


def parse_source(value: str) -> Source:
    """Convert a --source option value into a Source."""
    try:
        return Source(value)
    except ValueError:
        raise InvalidSourceError(value) from None


def plan(
    remote_name: str,
    local_dir_name: str,
    source_of_truth: Source,
    dry_run: bool = False,
) -> SyncAction:
    """Compare both names and pick the rename direction.

    Names are compared exactly (case-sensitive). dry_run is carried into the
    action unchanged and never influences the direction.
    """
    if remote_name == local_dir_name:
        return SyncAction(
            direction=Direction.NOOP,
            from_name=local_dir_name,
            to_name=remote_name,
            dry_run=dry_run,
        )
    if source_of_truth is Source.REMOTE:
        return SyncAction(
            direction=Direction.RENAME_LOCAL,
            from_name=local_dir_name,
            to_name=remote_name,
            dry_run=dry_run,
        )
    return SyncAction(
        direction=Direction.RENAME_REMOTE,
        from_name=remote_name,
        to_name=local_dir_name,
        dry_run=dry_run,
    )


def check_supported(action: SyncAction, reference: RemoteReference) -> None:
    """Reject directions the remote's kind cannot carry out."""
    if action.direction is Direction.RENAME_REMOTE and reference.kind is not RemoteKind.GITHUB:
        raise UnsupportedRemoteError(
            f"Renaming the remote repository is not supported for this remote kind "
            f"({reference.kind.value}): {reference.raw_url}"
        )
