"""Provider for remotes whose name is fixed by their URL."""

from __future__ import annotations

from git_repo_name.errors import UnsupportedRemoteError
from git_repo_name.models import RemoteReference, RemoteRepository
from git_repo_name.providers.base import RemoteProvider


class StaticNameProvider(RemoteProvider):
    """File remotes and hosts without an API integration.

    The repository name is the parsed path segment, so reading it needs no I/O
    and renaming it is not possible through this tool.
    """

    def get_repository(self, reference: RemoteReference) -> RemoteRepository:
        return RemoteRepository(name=reference.repository_name, owner=reference.owner)

    def rename(self, reference: RemoteReference, new_name: str) -> RemoteRepository:
        raise UnsupportedRemoteError(
            f"Renaming the remote repository is not supported for this remote kind "
            f"({reference.kind.value}): {reference.raw_url}"
        )
