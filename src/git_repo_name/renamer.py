"""Rename a repository's working directory, including the one we run from."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from git_repo_name.errors import DirectoryRenameError, TargetExistsError

logger = logging.getLogger(__name__)


def is_inside(path: Path, root: Path) -> bool:
    """Return True if path is root or one of its descendants."""
    try:
        path.relative_to(root)
    except ValueError:
        return False
    return True


def rename_directory(source: Path, target: Path, currently_inside: bool) -> Path | None:
    """Move source to target with a single rename of the directory entry.

    When currently_inside is set the process working directory is source or
    one of its descendants. The process steps out to the parent while the move
    happens (Windows refuses to rename a directory that is in use) and then
    re-enters the same relative location under target, which is returned.
    """
    source = Path(source).absolute()
    target = Path(target).absolute()

    if not source.is_dir():
        raise DirectoryRenameError(f"Directory '{source}' does not exist")
    if target.exists():
        raise TargetExistsError(target)

    relative = None
    if currently_inside:
        relative = Path(os.getcwd()).relative_to(source)
        os.chdir(source.parent)

    try:
        os.rename(source, target)
    except OSError as exc:
        if relative is not None:
            os.chdir(source / relative)
        raise DirectoryRenameError(f"Failed to rename directory: {exc}") from exc
    logger.debug("Renamed %s -> %s", source, target)

    if relative is None:
        return None
    new_cwd = target / relative
    os.chdir(new_cwd)
    return new_cwd
