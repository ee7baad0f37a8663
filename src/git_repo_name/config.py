"""Persistent configuration: default remote and the GitHub token."""

from __future__ import annotations

import configparser
import logging
import os
from pathlib import Path

from git_repo_name import token_store
from git_repo_name.errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "git-repo-name"
DEFAULT_REMOTE = "origin"
TOKEN_KEY = "github_token"

# config <key> names accepted on the command line
VALID_KEYS = ("github-token", "default-remote")


def default_config_dir() -> Path:
    override = os.environ.get("GIT_REPO_NAME_CONFIG_DIR")
    if override:
        return Path(override)
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / APP_NAME
    return Path.home() / ".config" / APP_NAME


class Config:
    """INI-backed settings, with the token kept in the OS keychain when possible."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or default_config_dir()
        self._parser = configparser.ConfigParser()
        self._load()

    @property
    def path(self) -> Path:
        return self.config_dir / "config"

    def _load(self) -> None:
        if not self.path.exists():
            return
        try:
            self._parser.read(self.path, encoding="utf-8")
        except configparser.Error as exc:
            raise ConfigError(f"Failed to read config file {self.path}: {exc}") from exc

    def _write(self) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        # create with 0600 so the token is never world-readable, even briefly
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            self._parser.write(fh)
        os.chmod(self.path, 0o600)

    def _set(self, section: str, option: str, value: str) -> None:
        if not self._parser.has_section(section):
            self._parser.add_section(section)
        self._parser.set(section, option, value)

    def _remove(self, section: str, option: str) -> None:
        if self._parser.has_option(section, option):
            self._parser.remove_option(section, option)
            self._write()

    @property
    def default_remote(self) -> str:
        return self._parser.get("core", "default_remote", fallback=DEFAULT_REMOTE)

    def set_default_remote(self, remote: str) -> None:
        self._set("core", "default_remote", remote)
        self._write()

    def get_token(self) -> str | None:
        """Return the GitHub token, or None when none is configured."""
        token = token_store.load(TOKEN_KEY)
        if token:
            return token
        return self._parser.get("github", "token", fallback=None) or None

    def set_token(self, token: str) -> None:
        if token_store.save(TOKEN_KEY, token):
            # drop any plaintext copy left from before the keychain was usable
            self._remove("github", "token")
            return
        logger.info("Storing GitHub token in %s", self.path)
        self._set("github", "token", token)
        self._write()

    def unset_token(self) -> None:
        """Forget the GitHub token in the keychain and in the config file."""
        token_store.delete(TOKEN_KEY)
        self._remove("github", "token")

    def get(self, key: str) -> str:
        if key == "github-token":
            token = self.get_token()
            if token is None:
                raise ConfigError("No GitHub token found in configuration")
            return token
        if key == "default-remote":
            return self.default_remote
        raise _unknown_key(key)

    def set(self, key: str, value: str) -> None:
        if key == "github-token":
            self.set_token(value)
        elif key == "default-remote":
            self.set_default_remote(value)
        else:
            raise _unknown_key(key)

    def unset(self, key: str) -> None:
        if key == "github-token":
            self.unset_token()
        elif key == "default-remote":
            self._remove("core", "default_remote")
        else:
            raise _unknown_key(key)


def _unknown_key(key: str) -> ConfigError:
    return ConfigError(
        f"Unknown config key: {key}. Valid keys: {', '.join(VALID_KEYS)}"
    )
