"""Remote URL parsing and remote kind detection."""

from __future__ import annotations

import re
from urllib.parse import urlparse

from git_repo_name.errors import RemoteURLParseError
from git_repo_name.models import RemoteKind, RemoteReference

_GITHUB_HOSTS = ("github.com", "www.github.com")
_NETWORK_SCHEMES = ("http", "https", "ssh", "git", "git+ssh")

# user@host:path, the scp-like syntax git accepts for ssh remotes
_SCP_PATTERN = re.compile(r"^[\w.+-]+@(?P<host>[\w.-]+):(?P<path>.*)$")


def parse_remote_url(url: str) -> RemoteReference:
    """Parse a git remote URL and return its canonical RemoteReference.

    Supported formats:
      - https://github.com/owner/repo[.git] (also gitlab.com, bitbucket.org, ...)
      - git@github.com:owner/repo[.git], git@gitlab.com:group/subgroup/repo.git
      - ssh://git@github.com[:port]/owner/repo[.git]
      - git://github.com/owner/repo[.git]
      - file:///abs/path/to/repo[.git]
      - /abs/path/to/repo[.git]
      - ../relative/path/to/repo[.git]

    Parsing is a pure string transformation; the filesystem and the network
    are never consulted.
    """
    url = url.strip()
    if not url:
        raise RemoteURLParseError("URL is empty.")

    if "://" in url:
        parsed = urlparse(url)
        scheme = parsed.scheme.lower()
        if scheme == "file":
            return _parse_path(parsed.path, url)
        if scheme not in _NETWORK_SCHEMES:
            raise RemoteURLParseError(f"Unsupported scheme: {parsed.scheme}")
        host = parsed.hostname
        if not host:
            raise RemoteURLParseError(f"Invalid URL (no host): {url}")
        return _parse_hosted(host, parsed.path, url)

    match = _SCP_PATTERN.match(url)
    if match:
        return _parse_hosted(match.group("host").lower(), match.group("path"), url)

    return _parse_path(url, url)


def _strip_git_suffix(name: str) -> str:
    return name.removesuffix(".git")


def _parse_hosted(host: str, path: str, raw_url: str) -> RemoteReference:
    """Parse the path of a URL that names a hosting service."""
    parts = [part for part in path.split("/") if part]
    if not parts:
        raise RemoteURLParseError(f"URL must include a repository path: {raw_url}")

    name = _strip_git_suffix(parts[-1])
    if not name:
        raise RemoteURLParseError(f"URL has an empty repository name: {raw_url}")
    owner = "/".join(parts[:-1]) or None

    if host in _GITHUB_HOSTS:
        # GitHub has no nested namespaces: exactly owner/repo
        if len(parts) != 2:
            raise RemoteURLParseError(
                f"GitHub URL must include owner/repo: {raw_url}"
            )
        return RemoteReference(
            repository_name=name,
            kind=RemoteKind.GITHUB,
            host="github.com",
            owner=owner,
            raw_url=raw_url,
        )

    return RemoteReference(
        repository_name=name,
        kind=RemoteKind.OTHER,
        host=host,
        owner=owner,
        raw_url=raw_url,
    )


def _parse_path(path: str, raw_url: str) -> RemoteReference:
    """Parse an absolute, relative or file:// filesystem remote."""
    trimmed = path.rstrip("/")
    name = _strip_git_suffix(trimmed.rsplit("/", 1)[-1])
    if name in ("", ".", ".."):
        raise RemoteURLParseError(
            f"Could not extract repository name from path: {raw_url}"
        )
    return RemoteReference(
        repository_name=name,
        kind=RemoteKind.FILE,
        raw_url=raw_url,
    )


def format_remote_url(original_url: str, owner: str, name: str) -> str:
    """Point original_url at owner/name, keeping everything else about it.

    Scheme, credentials, host and port survive the rewrite; only the
    repository path changes.
    """
    original_url = original_url.strip()
    new_path = f"{owner}/{name}.git"

    if "://" in original_url:
        return urlparse(original_url)._replace(path=f"/{new_path}").geturl()

    match = _SCP_PATTERN.match(original_url)
    if match:
        return f"{original_url[: match.start('path')]}{new_path}"

    return f"https://github.com/{new_path}"
