"""GitHub token storage in the OS keychain.

Every function degrades quietly: when no keychain backend is usable the
callers fall back to the config file, so nothing here raises.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_SERVICE_NAME = "git-repo-name"
_AVAILABLE = False

try:
    import keyring
    from keyring.errors import PasswordDeleteError
    from keyring.backends import fail

    # keyring imports fine on headless machines but then has no usable backend
    _AVAILABLE = not isinstance(keyring.get_keyring(), fail.Keyring)
except Exception:
    logger.warning("keyring not available; falling back to the config file")


def load(key: str) -> str | None:
    """Return the stored token for key, or None."""
    if not _AVAILABLE:
        return None
    try:
        return keyring.get_password(_SERVICE_NAME, key)
    except Exception:
        logger.warning("Failed to read %s from keyring", key)
        return None


def save(key: str, value: str) -> bool:
    """Store value under key. False means the caller must keep it elsewhere."""
    if not _AVAILABLE or not value:
        return False
    try:
        keyring.set_password(_SERVICE_NAME, key, value)
        return True
    except Exception:
        logger.warning("Failed to save %s to keyring", key)
        return False


def delete(key: str) -> bool:
    """Remove key from the keychain. Returns True if an entry was removed."""
    if not _AVAILABLE:
        return False
    try:
        keyring.delete_password(_SERVICE_NAME, key)
        return True
    except PasswordDeleteError:
        logger.debug("No %s entry in keyring", key)
        return False
    except Exception:
        logger.warning("Failed to delete %s from keyring", key)
        return False
