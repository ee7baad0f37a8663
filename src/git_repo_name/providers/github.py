"""GitHub REST API provider."""

from __future__ import annotations

import logging
import os

import requests

from git_repo_name.errors import AuthRequiredError, GitHubError, RateLimitError
from git_repo_name.models import RemoteReference, RemoteRepository
from git_repo_name.providers.base import RemoteProvider

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.github.com"


class GitHubProvider(RemoteProvider):
    """Provider for GitHub repositories using the REST API."""

    def __init__(self, token: str | None = None, api_base: str | None = None):
        self.token = token
        self.api_base = (
            api_base or os.environ.get("GITHUB_API_BASE_URL") or DEFAULT_API_BASE
        ).rstrip("/")
        self.session = requests.Session()
        self.session.headers["Accept"] = "application/vnd.github+json"
        self.session.headers["User-Agent"] = "git-repo-name"
        if token:
            self.session.headers["Authorization"] = f"Bearer {token}"

    def _check_rate_limit(self, response: requests.Response) -> None:
        remaining = response.headers.get("X-RateLimit-Remaining")
        if remaining is not None and int(remaining) == 0:
            reset_at = int(response.headers.get("X-RateLimit-Reset", 0))
            raise RateLimitError(reset_at)

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.api_base}{path}"
        logger.debug("%s %s (authenticated=%s)", method, url, bool(self.token))
        try:
            resp = self.session.request(method, url, timeout=30, **kwargs)
        except requests.RequestException as exc:
            raise GitHubError(f"GitHub API request failed: {exc}") from exc

        if resp.status_code == 404:
            # GitHub answers 404 rather than 401 for private repos
            if not self.token:
                raise AuthRequiredError("Repository not found.")
            raise GitHubError(
                "Repository not found. Check the remote URL and the token's access."
            )
        if resp.status_code == 401:
            raise GitHubError("Authentication failed. Check your GitHub token.")
        if resp.status_code in (403, 429):
            # a spent quota only matters on a refused request
            self._check_rate_limit(resp)
        if resp.status_code == 403:
            raise GitHubError(
                "Access denied. The token may lack admin rights, or rate limit exceeded."
            )
        if resp.status_code == 422:
            try:
                message = resp.json().get("message", "Validation failed")
            except ValueError:
                message = resp.text or "Validation failed"
            raise GitHubError(f"GitHub rejected the request: {message}")
        try:
            resp.raise_for_status()
        except requests.HTTPError as exc:
            raise GitHubError(str(exc)) from exc
        return resp.json()

    @staticmethod
    def _to_repository(data: dict, fallback_owner: str | None) -> RemoteRepository:
        full_name = data.get("full_name") or ""
        owner = full_name.split("/", 1)[0] if "/" in full_name else fallback_owner
        return RemoteRepository(name=data["name"], owner=owner)

    def get_repository(self, reference: RemoteReference) -> RemoteRepository:
        data = self._request(
            "GET", f"/repos/{reference.owner}/{reference.repository_name}"
        )
        return self._to_repository(data, reference.owner)

    def rename(self, reference: RemoteReference, new_name: str) -> RemoteRepository:
        if not self.token:
            raise AuthRequiredError("Renaming a GitHub repository requires a token.")
        data = self._request(
            "PATCH",
            f"/repos/{reference.owner}/{reference.repository_name}",
            json={"name": new_name},
        )
        logger.info(
            "Renamed %s/%s to %s", reference.owner, reference.repository_name, data.get("name")
        )
        return self._to_repository(data, reference.owner)
