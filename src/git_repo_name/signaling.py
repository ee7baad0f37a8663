"""Tell the invoking shell that its working directory was renamed.

A child process cannot change its parent's working directory, so after a
local rename the tool prints one reserved marker line:

    GRN_DIR_CHANGE:<absolute_old_path>:<absolute_new_path>

The shell wrapper (see shell/git-repo-name.sh) hides that line from the user,
scans the captured output once the command has exited, and runs ``cd`` only if
its own $PWD is exactly the old path. The functions below are the producer
side plus a Python rendition of the wrapper's decision, used by the tests.

Paths containing ':' are not escaped. The consumer splits on the first colon
after the prefix, so only a colon inside the old path is ambiguous.
"""

from __future__ import annotations

from pathlib import Path

import typer

MARKER_PREFIX = "GRN_DIR_CHANGE:"
WRAPPER_SCRIPT = "git-repo-name.sh"


def format_marker(old_path: Path, new_path: Path) -> str:
    return f"{MARKER_PREFIX}{Path(old_path).absolute()}:{Path(new_path).absolute()}"


def emit_marker(old_path: Path, new_path: Path) -> None:
    """Write the marker line to stdout, bypassing any styled console."""
    typer.echo(format_marker(old_path, new_path))


def parse_marker(line: str) -> tuple[str, str] | None:
    """Return (old_path, new_path) for a marker line, or None."""
    line = line.rstrip("\r\n")
    if not line.startswith(MARKER_PREFIX):
        return None
    old_path, sep, new_path = line[len(MARKER_PREFIX):].partition(":")
    if not sep or not old_path or not new_path:
        return None
    return old_path, new_path


def find_marker(output: str) -> tuple[str, str] | None:
    """Return the first well-formed marker in a captured output stream."""
    for line in output.splitlines():
        marker = parse_marker(line)
        if marker is not None:
            return marker
    return None


def strip_markers(output: str) -> str:
    """Return output as the user sees it through the wrapper."""
    return "".join(
        line
        for line in output.splitlines(keepends=True)
        if not line.startswith(MARKER_PREFIX)
    )


def resolve_shell_directory(output: str, shell_cwd: str) -> str | None:
    """Return the directory the shell should cd to, or None to stay put.

    A marker only applies to a shell that is still sitting in the old path;
    anything else (the user moved, or the command ran against another
    repository) leaves the shell where it is.
    """
    marker = find_marker(output)
    if marker is None:
        return None
    old_path, new_path = marker
    if shell_cwd != old_path:
        return None
    return new_path


def wrapper_script() -> str:
    """Return the bundled shell wrapper source."""
    return (Path(__file__).parent / "shell" / WRAPPER_SCRIPT).read_text(encoding="utf-8")
