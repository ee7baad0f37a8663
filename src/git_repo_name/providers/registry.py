"""Map each remote kind to the provider that handles it."""

from __future__ import annotations

from git_repo_name.models import RemoteKind, RemoteReference
from git_repo_name.providers.base import RemoteProvider
from git_repo_name.providers.github import GitHubProvider
from git_repo_name.providers.static import StaticNameProvider

# Closed table: adding a provider means adding a RemoteKind member and a row here.
PROVIDERS: dict[RemoteKind, type[RemoteProvider]] = {
    RemoteKind.GITHUB: GitHubProvider,
    RemoteKind.FILE: StaticNameProvider,
    RemoteKind.OTHER: StaticNameProvider,
}


def get_provider(reference: RemoteReference, token: str | None = None) -> RemoteProvider:
    provider_cls = PROVIDERS[reference.kind]
    if provider_cls is GitHubProvider:
        return GitHubProvider(token=token)
    return provider_cls()
