# ABOUTME: HTTP client for the KontactShare profile service.
# ABOUTME: Attaches bearer auth, encodes JSON and converts every failure into a GatewayError.

from typing import Any
from urllib.parse import quote

import httpx

from kontactshare_admin.api.exceptions import (
    NetworkFailure,
    RemoteError,
    UnauthenticatedError,
)
from kontactshare_admin.auth.token_store import TokenStore
from kontactshare_admin.config import Settings
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import BulkAction

logger = get_logger(__name__)


class GatewayClient:
    """Single choke point for all network I/O against the profile service.

    The client never retries and never changes local state; callers own
    any state updates after a successful response.
    """

    def __init__(
        self,
        base_url: str,
        token_store: TokenStore,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Create a client for the profile service.

        Args:
            base_url: Service base URL, e.g. http://localhost:3001/api.
            token_store: Session context supplying the bearer token.
            timeout: Request timeout in seconds for the owned HTTP client.
            http_client: Optional preconfigured httpx client (used in tests).
        """
        self.base_url = base_url.rstrip("/")
        self._token_store = token_store
        self._owns_http = http_client is None
        self._http = http_client if http_client is not None else httpx.Client(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings, token_store: TokenStore) -> "GatewayClient":
        return cls(settings.api_base_url, token_store, timeout=settings.request_timeout)

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
        self,
        path: str,
        method: str = "GET",
        body: Any = None,
        requires_auth: bool = False,
        params: dict[str, str] | None = None,
    ) -> Any:
        """Send a JSON request and decode the JSON response.

        Args:
            path: Path relative to the base URL, starting with "/".
            method: HTTP method.
            body: JSON-serializable request body, or None for no body.
            requires_auth: Attach the stored bearer token; fail if there is none.
            params: Optional query string parameters.

        Returns:
            The decoded JSON body, or None when the response has no content.

        Raises:
            UnauthenticatedError: If auth is required and no token is stored,
                or the service answers 401.
            RemoteError: If the service answers with any other non-2xx status.
            NetworkFailure: If the request could not be completed.
        """
        headers = {"Content-Type": "application/json"}
        if requires_auth:
            token = self._token_store.get()
            if not token:
                raise UnauthenticatedError("Not authenticated")
            headers["Authorization"] = f"Bearer {token}"

        log = logger.bind(method=method, path=path)
        log.debug("request_started")

        try:
            response = self._http.request(
                method,
                f"{self.base_url}{path}",
                headers=headers,
                params=params,
                json=body,
            )
        except httpx.HTTPError as e:
            log.warning("request_failed", error=str(e))
            raise NetworkFailure(f"Network error: {e}") from e

        if not response.is_success:
            message = self._error_message(response)
            log.warning("request_rejected", status=response.status_code, error=message)
            if response.status_code == 401:
                raise UnauthenticatedError(message, status_code=response.status_code)
            raise RemoteError(message, status_code=response.status_code)

        log.debug("request_completed", status=response.status_code)
        return self._decode(response)

    def _error_message(self, response: httpx.Response) -> str:
        """Extract the service's error message, falling back to the status code."""
        message = f"HTTP {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return message
        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return message

    def _decode(self, response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return None

    def admin_login(self, email: str, password: str) -> str:
        """Exchange admin credentials for a session token.

        Returns:
            The bearer token. The caller decides where to keep it.

        Raises:
            RemoteError: If the credentials are rejected or no token is returned.
        """
        data = self.request("/admin/login", "POST", {"email": email, "password": password})
        if not isinstance(data, dict) or not data.get("token"):
            raise RemoteError("Login response did not include a token")
        return str(data["token"])

    def create_profile(self, payload: dict[str, Any]) -> dict[str, Any] | None:
        return self.request("/profiles", "POST", payload, requires_auth=True)

    def delete_profile(self, unique_code: str) -> Any:
        return self.request(f"/profiles/{_segment(unique_code)}", "DELETE", requires_auth=True)

    def ban_profile(self, unique_code: str) -> Any:
        return self.request(
            f"/admin/profiles/{_segment(unique_code)}/ban", "POST", requires_auth=True
        )

    def unban_profile(self, unique_code: str) -> Any:
        return self.request(
            f"/admin/profiles/{_segment(unique_code)}/unban", "POST", requires_auth=True
        )

    def get_public_profile(self, unique_code: str) -> dict[str, Any] | None:
        return self.request(f"/profiles/{_segment(unique_code)}")

    def get_all_profiles(
        self,
        page: int | None = None,
        limit: int | None = None,
        search: str | None = None,
        status: str | None = None,
    ) -> dict[str, Any] | None:
        """Fetch one page of profiles visible to the admin.

        Only non-empty filters are sent as query parameters.
        """
        params: dict[str, str] = {}
        if page:
            params["page"] = str(page)
        if limit:
            params["limit"] = str(limit)
        if search:
            params["search"] = search
        if status:
            params["status"] = status
        return self.request("/admin/profiles", params=params or None, requires_auth=True)

    def get_dashboard_stats(self) -> dict[str, Any] | None:
        return self.request("/admin/stats", requires_auth=True)

    def bulk_operation(self, action: BulkAction | str, unique_codes: list[str]) -> Any:
        action_value = action.value if isinstance(action, BulkAction) else action
        return self.request(
            "/admin/profiles/bulk",
            "POST",
            {"action": action_value, "uniqueCodes": list(unique_codes)},
            requires_auth=True,
        )


def _segment(value: str) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(value, safe="")
