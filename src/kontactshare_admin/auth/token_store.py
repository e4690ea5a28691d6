# ABOUTME: Token stores holding the admin session's bearer token.
# ABOUTME: Provides a durable OS keyring store and a per-instance in-memory store.

from abc import ABC, abstractmethod

import keyring
from keyring.errors import PasswordDeleteError

from kontactshare_admin.logging import get_logger

logger = get_logger(__name__)


class TokenStore(ABC):
    """Single slot for the current session token."""

    @abstractmethod
    def set(self, token: str) -> None:
        """Store the token, replacing any previous one."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or None when logged out."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored token. Clearing an empty store is a no-op."""

    @property
    def is_authenticated(self) -> bool:
        return bool(self.get())


class KeyringTokenStore(TokenStore):
    """Token store backed by the OS keyring so sessions survive restarts."""

    SERVICE_NAME = "kontactshare-admin"
    DEFAULT_KEY = "admin_jwt"

    def __init__(self, key: str = DEFAULT_KEY, service_name: str = SERVICE_NAME) -> None:
        """Initialize the keyring token store.

        Args:
            key: Keyring username under which the token is stored.
            service_name: Keyring service name.
        """
        self.key = key
        self.service_name = service_name

    def set(self, token: str) -> None:
        keyring.set_password(self.service_name, self.key, token)
        logger.debug("token_stored", key=self.key)

    def get(self) -> str | None:
        token = keyring.get_password(self.service_name, self.key)
        return token or None

    def clear(self) -> None:
        try:
            keyring.delete_password(self.service_name, self.key)
        except PasswordDeleteError:
            return
        logger.debug("token_cleared", key=self.key)


class MemoryTokenStore(TokenStore):
    """Token store that keeps the token on the instance only."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def set(self, token: str) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def clear(self) -> None:
        self._token = None
