"""Abstract base class for remote providers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from git_repo_name.models import RemoteReference, RemoteRepository


class RemoteProvider(ABC):
    """Base class for the services that own a remote repository's name."""

    @abstractmethod
    def get_repository(self, reference: RemoteReference) -> RemoteRepository:
        """Return the remote's current metadata for the repository."""

    @abstractmethod
    def rename(self, reference: RemoteReference, new_name: str) -> RemoteRepository:
        """Rename the repository on the remote and return the updated metadata."""

    def fetch_name(self, reference: RemoteReference) -> str:
        """Return the repository name as the remote currently reports it."""
        return self.get_repository(reference).name
