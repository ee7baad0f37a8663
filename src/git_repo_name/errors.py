"""Exception hierarchy for git-repo-name.

Every error carries the process exit status the CLI should use for it.
"""

from __future__ import annotations

import time

USAGE_EXIT_CODE = 2


class GitRepoNameError(Exception):
    """Base class for all expected failures."""

    exit_code = 1


class RemoteURLParseError(GitRepoNameError):
    """Raised when a remote URL cannot be parsed."""

    exit_code = USAGE_EXIT_CODE


class InvalidSourceError(GitRepoNameError):
    exit_code = USAGE_EXIT_CODE

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"invalid value for --source: '{value}'. "
            "Valid values are 'remote' or 'local'"
        )


class ConfigError(GitRepoNameError):
    """Raised for unreadable config files and unknown config keys."""


class ProviderError(GitRepoNameError):
    """Raised when a remote provider cannot complete a request."""


class AuthRequiredError(ProviderError):
    def __init__(self, detail: str = ""):
        message = (
            "No GitHub token found in configuration. "
            "If this is a private repository, or you are renaming it, run: "
            "git-repo-name config github-token <token>"
        )
        if detail:
            message = f"{detail} {message}"
        super().__init__(message)


class UnsupportedRemoteError(ProviderError):
    exit_code = USAGE_EXIT_CODE


class GitHubError(ProviderError):
    """Raised for GitHub API errors."""


class RateLimitError(GitHubError):
    """Raised when GitHub rate limit is exceeded."""

    def __init__(self, reset_at: int):
        self.reset_at = reset_at
        wait = max(0, reset_at - int(time.time()))
        super().__init__(
            f"GitHub API rate limit exceeded. Resets in {wait} seconds."
        )


class DirectoryRenameError(GitRepoNameError):
    """Raised when the local directory cannot be renamed."""


class TargetExistsError(DirectoryRenameError):
    def __init__(self, target):
        self.target = target
        super().__init__(f"Target path '{target}' already exists")


class GitCommandError(GitRepoNameError):
    """Raised when a git invocation fails."""


class NotAGitRepositoryError(GitCommandError):
    def __init__(self, returncode: int = 128):
        self.exit_code = returncode
        super().__init__("not a git repository")


class NoRemoteError(GitCommandError):
    exit_code = USAGE_EXIT_CODE

    def __init__(self, remote: str):
        self.remote = remote
        super().__init__(f"no remote named '{remote}' configured")


class PartialSyncError(GitRepoNameError):
    """Raised when one side was renamed but a follow-up step failed."""
