# ABOUTME: Profile store backed by the remote KontactShare profile service.
# ABOUTME: Delegates each operation to GatewayClient and maps responses to models.

from kontactshare_admin.api.client import GatewayClient
from kontactshare_admin.api.mapper import (
    map_bulk_result,
    map_created_profile,
    map_dashboard_stats,
    map_profile,
    map_profile_page,
)
from kontactshare_admin.api.exceptions import RemoteError
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import (
    BulkAction,
    BulkResult,
    CreatedProfile,
    DashboardStats,
    Profile,
    ProfilePage,
    ProfilePayload,
    ProfileStatus,
)
from kontactshare_admin.models.query import QueryState
from kontactshare_admin.stores.base import ProfileStore

logger = get_logger(__name__)


class RemoteProfileStore(ProfileStore):
    """Profile store that treats the remote service as the source of truth."""

    def __init__(self, client: GatewayClient, public_base_url: str) -> None:
        """Initialize the remote store.

        Args:
            client: Gateway client for the profile service.
            public_base_url: Base URL for shareable profile links.
        """
        self._client = client
        self._public_base_url = public_base_url

    def create(self, payload: ProfilePayload) -> CreatedProfile:
        data = self._client.create_profile(payload.to_wire())
        created = map_created_profile(data, payload, self._public_base_url)
        logger.info("profile_created", unique_code=created.unique_code)
        return created

    def list_profiles(self, query: QueryState) -> ProfilePage:
        data = self._client.get_all_profiles(
            page=query.page,
            limit=query.limit,
            search=query.search,
            status=query.status.value if query.status else None,
        )
        return map_profile_page(data, limit=query.limit)

    def get(self, unique_code: str) -> Profile:
        data = self._client.get_public_profile(unique_code)
        if not data:
            raise RemoteError(f"Profile '{unique_code}' returned no content")
        return map_profile(data)

    def set_status(self, unique_code: str, status: ProfileStatus) -> None:
        if status == ProfileStatus.BANNED:
            self._client.ban_profile(unique_code)
        else:
            self._client.unban_profile(unique_code)
        logger.info("profile_status_changed", unique_code=unique_code, status=status.value)

    def delete(self, unique_code: str) -> None:
        self._client.delete_profile(unique_code)
        logger.info("profile_deleted", unique_code=unique_code)

    def bulk(self, action: BulkAction, unique_codes: list[str]) -> BulkResult:
        data = self._client.bulk_operation(action, unique_codes)
        result = map_bulk_result(action, unique_codes, data)
        logger.info(
            "bulk_action_applied",
            action=action.value,
            requested=len(unique_codes),
            failed=len(result.failed),
        )
        return result

    def stats(self) -> DashboardStats:
        return map_dashboard_stats(self._client.get_dashboard_stats())

    def close(self) -> None:
        self._client.close()
