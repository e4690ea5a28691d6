# ABOUTME: Admin session lifecycle tying the login call to the token store.
# ABOUTME: Stores the token after a successful login and clears it on logout.

from typing import TYPE_CHECKING

from kontactshare_admin.auth.token_store import TokenStore
from kontactshare_admin.logging import get_logger

if TYPE_CHECKING:
    from kontactshare_admin.api.client import GatewayClient

logger = get_logger(__name__)


class AdminSession:
    """Login/logout for an administrator."""

    def __init__(self, client: "GatewayClient", token_store: TokenStore) -> None:
        """Initialize the session.

        Args:
            client: Gateway client used for the login request.
            token_store: Store that receives the token on login.
        """
        self._client = client
        self._token_store = token_store

    @property
    def is_authenticated(self) -> bool:
        return self._token_store.is_authenticated

    def login(self, email: str, password: str) -> None:
        """Log in and keep the returned token.

        The previous token, if any, is left untouched when login fails.

        Raises:
            GatewayError: If the service rejects the credentials or is unreachable.
        """
        token = self._client.admin_login(email, password)
        self._token_store.set(token)
        logger.info("admin_logged_in", email=email)

    def logout(self) -> None:
        self._token_store.clear()
        logger.info("admin_logged_out")
