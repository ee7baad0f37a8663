import shutil
import subprocess
from pathlib import Path

import pytest

from git_repo_name import token_store


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep every test away from the user's config file and keychain."""
    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("GIT_REPO_NAME_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("GITHUB_API_BASE_URL", raising=False)
    monkeypatch.setattr(token_store, "_AVAILABLE", False)
    return config_dir


def run_git(*args: str, cwd: Path) -> str:
    result = subprocess.run(
        ["git", *args], cwd=cwd, check=True, capture_output=True, text=True
    )
    return result.stdout.strip()


@pytest.fixture
def workspace(tmp_path):
    # resolve so paths compare equal to what git and os.getcwd() report
    return tmp_path.resolve()


@pytest.fixture
def make_repo(workspace):
    """Create a git work tree named `name`, optionally with an origin remote."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    def _make(name: str, remote_url: str | None = None) -> Path:
        repo = workspace / name
        repo.mkdir(parents=True)
        run_git("init", "-q", cwd=repo)
        if remote_url is not None:
            run_git("remote", "add", "origin", remote_url, cwd=repo)
        return repo

    return _make
