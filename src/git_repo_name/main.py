"""Main entry point for the git-repo-name CLI."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Callable, Optional

import typer
from rich.console import Console

from git_repo_name import sync
from git_repo_name.config import Config
from git_repo_name.errors import GitRepoNameError
from git_repo_name.models import Source
from git_repo_name.planner import parse_source
from git_repo_name.signaling import wrapper_script

err_console = Console(stderr=True, soft_wrap=True, highlight=False, emoji=False)

app = typer.Typer(
    name="git-repo-name",
    help="Keep a git working directory name and its remote repository name in sync",
    add_completion=False,
    no_args_is_help=True,
)

REMOTE_OPTION = typer.Option(
    None, "--remote", "-r", help="Remote to use instead of the configured default"
)
DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-n", help="Show what would be renamed without renaming"
)


def _run(operation: Callable[[], object]) -> None:
    """Run one command, turning expected failures into a message and exit status."""
    try:
        operation()
    except GitRepoNameError as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False)
        raise typer.Exit(exc.exit_code)


def _sync(source: Source, remote: Optional[str], dry_run: bool) -> None:
    config = Config()
    context = sync.load_context(source, config, remote=remote, dry_run=dry_run)
    sync.run_sync(context, config)


@app.command()
def fetch(remote: Optional[str] = REMOTE_OPTION):
    """Print the remote repository's name."""

    def operation():
        config = Config()
        context = sync.load_context(Source.REMOTE, config, remote=remote)
        sync.fetch(context, config)

    _run(operation)


@app.command()
def pull(remote: Optional[str] = REMOTE_OPTION, dry_run: bool = DRY_RUN_OPTION):
    """Rename the local directory to match the remote repository."""
    _run(lambda: _sync(Source.REMOTE, remote, dry_run))


@app.command()
def push(remote: Optional[str] = REMOTE_OPTION, dry_run: bool = DRY_RUN_OPTION):
    """Rename the remote repository to match the local directory."""
    _run(lambda: _sync(Source.LOCAL, remote, dry_run))


@app.command(name="sync")
def sync_command(
    source: str = typer.Option(
        "remote", "--source", "-s", help="Which name wins: 'remote' or 'local'"
    ),
    remote: Optional[str] = REMOTE_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
):
    """Sync names in the direction given by --source."""
    _run(lambda: _sync(parse_source(source), remote, dry_run))


@app.command(name="config")
def config_command(
    key: str = typer.Argument(..., help="github-token or default-remote"),
    value: Optional[str] = typer.Argument(None, help="New value; omit to print the current one"),
    unset: bool = typer.Option(False, "--unset", help="Remove the stored value"),
):
    """Read or change a configuration value, or remove it with --unset."""

    def operation():
        config = Config()
        if unset:
            config.unset(key)
            typer.echo(f"Removed {key}")
            return
        if value is None:
            typer.echo(config.get(key))
            return
        config.set(key, value)
        if key == "github-token":
            typer.echo("GitHub token configured successfully")
        else:
            typer.echo(f"Default remote set to {value}")

    _run(operation)


@app.command(name="shell-init")
def shell_init():
    """Print the shell function that follows directory renames.

    Add `eval "$(git-repo-name-bin shell-init)"` to ~/.bashrc or ~/.zshrc.
    """
    typer.echo(wrapper_script(), nl=False)


def _version_callback(value: bool) -> None:
    if value:
        try:
            current = version("git-repo-name")
        except PackageNotFoundError:
            current = "unknown"
        typer.echo(f"git-repo-name version {current}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
    show_version: Optional[bool] = typer.Option(
        None,
        "--version",
        help="Show version and exit",
        is_eager=True,
        callback=_version_callback,
    ),
):
    """
    Keep a local git directory name and its remote repository name consistent.

    pull adopts the remote's name locally, push renames the remote after the
    local directory, fetch only reports the remote's name.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


if __name__ == "__main__":
    app()
