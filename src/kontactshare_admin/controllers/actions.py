# ABOUTME: Single-profile actions: view, ban, unban and delete by unique code.
# ABOUTME: Mutations reload the list controller's active page once they succeed.

from collections.abc import Callable

from kontactshare_admin.controllers.profile_list import ProfileListController
from kontactshare_admin.errors import KontactShareError
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import Profile, ProfileStatus
from kontactshare_admin.stores.base import ProfileStore

logger = get_logger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this profile? This action cannot be undone."


class ProfileActions:
    """Actions on one profile identified by its unique code."""

    def __init__(
        self,
        store: ProfileStore,
        confirm: Callable[[str], bool],
        profile_list: ProfileListController | None = None,
    ) -> None:
        """Initialize the actions.

        Args:
            store: Profile store to act on.
            confirm: Asked before a delete; returning False cancels it.
            profile_list: Optional list controller to reload after mutations.
        """
        self._store = store
        self._confirm = confirm
        self._list = profile_list

    def view(self, unique_code: str) -> Profile:
        return self._store.get(unique_code)

    def ban(self, unique_code: str) -> None:
        self._mutate(lambda: self._store.set_status(unique_code, ProfileStatus.BANNED))

    def unban(self, unique_code: str) -> None:
        self._mutate(lambda: self._store.set_status(unique_code, ProfileStatus.ACTIVE))

    def delete(self, unique_code: str) -> bool:
        """Delete a profile after confirmation.

        Returns:
            False if the operator declined, True once deleted.
        """
        if not self._confirm(DELETE_CONFIRMATION):
            return False
        self._mutate(lambda: self._store.delete(unique_code))
        return True

    def _mutate(self, operation: Callable[[], None]) -> None:
        page = self._list.current_page if self._list is not None else None
        operation()
        if self._list is None or page is None:
            return
        try:
            self._list.load(page)
        except KontactShareError as e:
            logger.warning("profile_reload_failed", page=page, error=str(e))
