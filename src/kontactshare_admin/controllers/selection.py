# ABOUTME: Controller for selecting profiles on the loaded page and running bulk actions.
# ABOUTME: Sends one bulk request per action, then clears the selection and reloads the page.

from collections.abc import Callable

from kontactshare_admin.controllers.profile_list import ProfileListController
from kontactshare_admin.errors import KontactShareError
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import BulkAction, BulkResult
from kontactshare_admin.stores.base import ProfileStore

logger = get_logger(__name__)


class SelectionController:
    """Owns the set of selected unique codes within the current page.

    The selection is not cleared when the page changes; it is only
    cleared explicitly or after a successful bulk action.
    """

    def __init__(
        self,
        store: ProfileStore,
        profile_list: ProfileListController,
        confirm: Callable[[str], bool],
    ) -> None:
        """Initialize the controller.

        Args:
            store: Profile store receiving bulk requests.
            profile_list: List controller to reload after an action.
            confirm: Asked before a bulk delete; returning False cancels it.
        """
        self._store = store
        self._list = profile_list
        self._confirm = confirm
        self._selected: dict[str, None] = {}

    @property
    def selected(self) -> list[str]:
        """Selected unique codes in selection order."""
        return list(self._selected)

    @property
    def all_selected(self) -> bool:
        codes = self._list.unique_codes
        return bool(codes) and set(codes) == set(self._selected)

    def is_selected(self, unique_code: str) -> bool:
        return unique_code in self._selected

    def toggle(self, unique_code: str) -> bool:
        """Add the code if absent, remove it if present.

        Returns:
            True if the code is selected afterwards.
        """
        if unique_code in self._selected:
            del self._selected[unique_code]
            return False
        self._selected[unique_code] = None
        return True

    def select_all(self, flag: bool) -> None:
        """Select every profile on the loaded page, or none."""
        self._selected = dict.fromkeys(self._list.unique_codes) if flag else {}

    def clear(self) -> None:
        self._selected = {}

    def bulk_action(self, kind: BulkAction | str) -> BulkResult | None:
        """Apply an action to every selected profile.

        Does nothing when the selection is empty or a delete is not
        confirmed. On success the selection is cleared and the page that
        was active before the action is reloaded. On failure the
        selection is kept.

        Args:
            kind: ban, unban or delete.

        Returns:
            The bulk result, or None if nothing was sent.

        Raises:
            KontactShareError: If the bulk request fails. A failed reload is
                only recorded on the list controller.
        """
        action = BulkAction(kind)
        if not self._selected:
            return None

        codes = self.selected
        if action == BulkAction.DELETE and not self._confirm(
            f"Are you sure you want to delete {len(codes)} profile(s)? "
            "This action cannot be undone."
        ):
            logger.info("bulk_delete_cancelled", count=len(codes))
            return None

        page = self._list.current_page
        result = self._store.bulk(action, codes)
        self._selected = {}
        logger.info("bulk_action_completed", action=action.value, count=len(codes))
        try:
            self._list.load(page)
        except KontactShareError as e:
            logger.warning("bulk_reload_failed", page=page, error=str(e))
        return result

    @staticmethod
    def summary(result: BulkResult) -> str:
        """Describe a bulk result for the operator."""
        message = f"{len(result.succeeded)} profiles {result.action.past_tense} successfully"
        if result.failed:
            message += f", {len(result.failed)} failed"
        return message
