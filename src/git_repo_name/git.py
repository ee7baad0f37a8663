"""Thin wrapper around the git command line."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from git_repo_name.errors import GitCommandError, NoRemoteError, NotAGitRepositoryError

logger = logging.getLogger(__name__)


def _run_git(args: list[str], cwd: Path | None = None) -> subprocess.CompletedProcess:
    logger.debug("git %s (cwd=%s)", " ".join(args), cwd or ".")
    try:
        return subprocess.run(
            ["git", *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise GitCommandError("git executable not found on PATH") from exc


def get_work_tree(cwd: Path | None = None) -> Path:
    """Return the absolute top-level directory of the enclosing work tree."""
    result = _run_git(["rev-parse", "--show-toplevel"], cwd=cwd)
    if result.returncode != 0:
        raise NotAGitRepositoryError(result.returncode)
    return Path(result.stdout.strip()).absolute()


def get_remote_url(remote: str, cwd: Path | None = None) -> str:
    result = _run_git(["remote", "get-url", remote], cwd=cwd)
    if result.returncode != 0:
        raise NoRemoteError(remote)
    return result.stdout.strip()


def set_remote_url(remote: str, url: str, cwd: Path | None = None) -> None:
    result = _run_git(["remote", "set-url", remote, url], cwd=cwd)
    if result.returncode != 0:
        raise GitCommandError(
            f"Failed to update '{remote}' remote: {result.stderr.strip()}"
        )
