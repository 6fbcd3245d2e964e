"""Bearer token storage.

The browser app keeps its token in per-user persistent storage. Clients only
see a ``CredentialProvider``, so tests can use a plain in-memory one.
"""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import MutableMapping
from typing import Any

import jwt

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"


def is_token_expired(token: str | None, now: float | None = None) -> bool:
    """Check whether a JWT can no longer be used.

    The signature is not verified; the backend does that. A token without an
    ``exp`` claim, or one that cannot be decoded, counts as expired.

    Args:
        token: Encoded JWT, or None.
        now: Current UNIX time. Defaults to ``time.time()``.

    Returns:
        True if the token is missing, undecodable, lacks ``exp`` or is past it.
    """
    if not token:
        return True
    try:
        claims = jwt.decode(token, options={"verify_signature": False})
    except jwt.InvalidTokenError as e:
        logger.debug(f"Could not decode token: {e}")
        return True

    exp = claims.get("exp")
    if not isinstance(exp, int | float):
        return True
    current = time.time() if now is None else now
    return current >= exp


class CredentialProvider(ABC):
    """Source of the bearer token used on every authenticated request."""

    @abstractmethod
    def get_token(self) -> str | None:
        """Return the stored token, or None."""

    @abstractmethod
    def set_token(self, token: str) -> None:
        """Persist a freshly issued token."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored token."""

    def get_valid_token(self) -> str | None:
        """Return the token if it is still usable, clearing it otherwise."""
        token = self.get_token()
        if is_token_expired(token):
            if token:
                logger.info("Stored token expired, clearing it")
            self.clear()
            return None
        return token


class InMemoryCredentialProvider(CredentialProvider):
    """Token held in process memory. Lost when the object goes away."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get_token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        self._token = None


class StorageCredentialProvider(CredentialProvider):
    """Token kept under a key of a mutable mapping.

    In the running app the mapping is NiceGUI's ``app.storage.user``, which
    persists per browser.
    """

    def __init__(self, storage: MutableMapping[str, Any], key: str = TOKEN_KEY) -> None:
        self._storage = storage
        self._key = key

    def get_token(self) -> str | None:
        token = self._storage.get(self._key)
        return token if isinstance(token, str) and token else None

    def set_token(self, token: str) -> None:
        self._storage[self._key] = token

    def clear(self) -> None:
        self._storage.pop(self._key, None)
