"""Keep the local directory name and the remote repository name in sync.

One invocation runs strictly in sequence: read the remote URL, parse it,
plan, call the provider, rename the directory, signal the shell. Nothing is
retried and nothing is rolled back; a remote URL update that fails after a
successful rename is reported as a PartialSyncError.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.console import Console

from git_repo_name import git
from git_repo_name.config import Config
from git_repo_name.errors import GitCommandError, PartialSyncError
from git_repo_name.models import (
    Direction,
    RemoteKind,
    RemoteReference,
    RemoteRepository,
    Source,
    SyncContext,
    SyncOutcome,
)
from git_repo_name.planner import check_supported, plan
from git_repo_name.providers.base import RemoteProvider
from git_repo_name.providers.registry import get_provider
from git_repo_name.renamer import is_inside, rename_directory
from git_repo_name.signaling import emit_marker
from git_repo_name.url_parser import format_remote_url, parse_remote_url

logger = logging.getLogger(__name__)

console = Console(soft_wrap=True, highlight=False, emoji=False)


def _say(message: str, style: str | None = None) -> None:
    console.print(message, style=style, markup=False)


def load_context(
    source: Source,
    config: Config,
    remote: str | None = None,
    dry_run: bool = False,
) -> SyncContext:
    """Create the per-invocation context from the current directory."""
    return SyncContext(
        source_of_truth=source,
        remote_name=remote or config.default_remote,
        local_directory_path=git.get_work_tree(),
        dry_run=dry_run,
    )


def _resolve_remote(
    context: SyncContext, config: Config
) -> tuple[str, RemoteReference, RemoteProvider]:
    url = git.get_remote_url(context.remote_name, cwd=context.local_directory_path)
    reference = parse_remote_url(url)
    # only GitHub needs a credential; file remotes never touch the store
    token = config.get_token() if reference.kind is RemoteKind.GITHUB else None
    logger.debug("Remote %s -> %s", context.remote_name, reference)
    return url, reference, get_provider(reference, token)


def fetch(context: SyncContext, config: Config) -> str:
    """Print the remote's repository name and compare it with the local one."""
    _, reference, provider = _resolve_remote(context, config)
    remote_name = provider.fetch_name(reference)
    local_name = context.local_directory_path.name

    _say(remote_name)
    if remote_name == local_name:
        _say(f"Repository names already match: {remote_name}", "green")
    else:
        _say(
            f"Local directory name '{local_name}' differs from remote name '{remote_name}'",
            "yellow",
        )
    return remote_name


def run_sync(context: SyncContext, config: Config) -> SyncOutcome:
    """Bring both names in line, taking context.source_of_truth as authoritative."""
    url, reference, provider = _resolve_remote(context, config)

    if context.source_of_truth is Source.REMOTE:
        remote_repo = provider.get_repository(reference)
    else:
        # pushing only needs the name in the URL; the rename call is the one request
        remote_repo = RemoteRepository(
            name=reference.repository_name, owner=reference.owner
        )

    action = plan(
        remote_repo.name,
        context.local_directory_path.name,
        context.source_of_truth,
        context.dry_run,
    )
    check_supported(action, reference)
    outcome = SyncOutcome(action=action)

    if action.direction is Direction.NOOP:
        _say(f"Repository names already match: {action.to_name}", "green")
    elif action.direction is Direction.RENAME_LOCAL:
        outcome.new_directory = _rename_local(context, action.from_name, action.to_name)
    else:
        outcome.new_remote_url = _rename_remote(
            context, provider, reference, url, action.to_name
        )

    # the remote URL follows only once the directory rename has gone through
    if context.source_of_truth is Source.REMOTE and reference.kind is RemoteKind.GITHUB:
        outcome.new_remote_url = _follow_remote(
            context, reference, remote_repo, url, renamed=outcome.new_directory
        )
    return outcome


def _change_remote_url(context: SyncContext, old_url: str, new_url: str) -> None:
    if context.dry_run:
        _say(f"Would change '{context.remote_name}' remote from '{old_url}' to '{new_url}'")
        return
    _say(f"Changing '{context.remote_name}' remote from '{old_url}' to '{new_url}'")
    git.set_remote_url(context.remote_name, new_url, cwd=context.local_directory_path)


def _follow_remote(
    context: SyncContext,
    reference: RemoteReference,
    remote_repo: RemoteRepository,
    url: str,
    renamed: Path | None = None,
) -> str | None:
    """Point the git remote at GitHub's current owner/name after a rename or transfer."""
    owner = remote_repo.owner or reference.owner
    if owner == reference.owner and remote_repo.name == reference.repository_name:
        return None
    new_url = format_remote_url(url, owner, remote_repo.name)
    try:
        _change_remote_url(context, url, new_url)
    except GitCommandError as exc:
        if renamed is None:
            raise
        raise PartialSyncError(
            f"Directory renamed to '{renamed}', but updating the "
            f"'{context.remote_name}' remote failed: {exc}"
        ) from exc
    return new_url


def _rename_local(context: SyncContext, old_name: str, new_name: str) -> Path | None:
    source = context.local_directory_path
    target = source.with_name(new_name)

    if context.dry_run:
        _say(f"Would rename directory from '{old_name}' to '{new_name}'")
        return None

    _say(f"Renaming directory from '{old_name}' to '{new_name}'")
    cwd = Path(os.getcwd())
    inside = is_inside(cwd, source)
    new_cwd = rename_directory(source, target, currently_inside=inside)
    context.local_directory_path = target

    if inside:
        emit_marker(cwd, new_cwd)
    else:
        emit_marker(source, target)
    return target


def _rename_remote(
    context: SyncContext,
    provider: RemoteProvider,
    reference: RemoteReference,
    url: str,
    new_name: str,
) -> str | None:
    old_name = reference.repository_name
    if context.dry_run:
        _say(f"Would rename remote repository from '{old_name}' to '{new_name}'")
        _change_remote_url(context, url, format_remote_url(url, reference.owner, new_name))
        return None

    _say(f"Renaming remote repository from '{old_name}' to '{new_name}'")
    updated = provider.rename(reference, new_name)
    new_url = format_remote_url(url, updated.owner or reference.owner, updated.name)
    if new_url == url:
        return None
    try:
        _change_remote_url(context, url, new_url)
    except GitCommandError as exc:
        raise PartialSyncError(
            f"Remote repository renamed to '{updated.name}', but updating the "
            f"'{context.remote_name}' remote failed: {exc}"
        ) from exc
    return new_url
