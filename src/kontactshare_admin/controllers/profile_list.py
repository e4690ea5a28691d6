# ABOUTME: Controller owning the paginated, filtered profile listing.
# ABOUTME: Re-queries on filter changes and discards responses from superseded requests.

from kontactshare_admin.errors import KontactShareError
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import Pagination, Profile, ProfileStatus
from kontactshare_admin.models.query import QueryState
from kontactshare_admin.stores.base import ProfileStore

logger = get_logger(__name__)


class ProfileListController:
    """Holds query state and the last page of profiles fetched for it.

    Every load takes a ticket from a monotonically increasing counter.
    Only the response to the most recently issued load is applied; a
    response that completes after a newer load was issued is dropped.
    """

    def __init__(self, store: ProfileStore, limit: int = 20) -> None:
        """Initialize the controller.

        Args:
            store: Profile store to query.
            limit: Profiles per page.
        """
        self._store = store
        self.query = QueryState(limit=limit)
        self.profiles: list[Profile] = []
        self.pagination: Pagination | None = None
        self.loading = False
        self.error: str | None = None
        self._latest_request = 0

    @property
    def current_page(self) -> int:
        """The page of the loaded result, or the queried page before any load."""
        if self.pagination is not None:
            return self.pagination.page
        return self.query.page

    @property
    def total_pages(self) -> int:
        return self.pagination.pages if self.pagination is not None else 0

    @property
    def unique_codes(self) -> list[str]:
        return [profile.unique_code for profile in self.profiles]

    def load(self, page: int = 1, query: QueryState | None = None) -> bool:
        """Fetch a page using the current search and status filters.

        The result set and query are replaced as a whole. On failure the
        previous result set and query are kept and the error message is
        recorded.

        Args:
            page: 1-based page number to fetch.
            query: Filters to fetch with instead of the current ones. Only
                adopted once the page arrives.

        Returns:
            True if the result was applied, False if a newer load superseded it.

        Raises:
            KontactShareError: If the store fails to return the page.
        """
        self._latest_request += 1
        request_id = self._latest_request
        base = query if query is not None else self.query
        query = QueryState.model_validate({**base.model_dump(), "page": page})

        self.loading = True
        log = logger.bind(request_id=request_id, page=page)
        log.debug("profile_list_loading", search=query.search, status=query.status)

        try:
            result = self._store.list_profiles(query)
        except KontactShareError as e:
            if request_id == self._latest_request:
                self.loading = False
                self.error = str(e)
            log.warning("profile_list_load_failed", error=str(e))
            raise

        if request_id != self._latest_request:
            log.debug("profile_list_stale_response_dropped", latest=self._latest_request)
            return False

        self.query = query
        self.profiles = result.profiles
        self.pagination = result.pagination
        self.loading = False
        self.error = None
        log.debug("profile_list_loaded", count=len(result.profiles), total=result.pagination.total)
        return True

    def refresh(self) -> bool:
        """Re-run the last query at the currently active page."""
        return self.load(self.current_page)

    def set_search(self, text: str | None) -> bool:
        """Change the search text and reload from page 1.

        Returns:
            True if the filter changed and a reload was applied.
        """
        return self.set_filters(search=text, status=self.query.status)

    def set_status(self, status: ProfileStatus | str | None) -> bool:
        """Change the status filter and reload from page 1."""
        return self.set_filters(search=self.query.search, status=status)

    def set_filters(
        self,
        search: str | None = None,
        status: ProfileStatus | str | None = None,
    ) -> bool:
        """Set both filters at once and reload from page 1 if either changed."""
        search = search.strip() if search else None
        status = ProfileStatus(status) if status else None
        if search == self.query.search and status == self.query.status:
            return False
        candidate = QueryState.model_validate(
            {**self.query.model_dump(), "search": search or None, "status": status, "page": 1}
        )
        return self.load(1, query=candidate)

    def can_go_to(self, page: int) -> bool:
        if page < 1:
            return False
        if self.pagination is not None and page > self.pagination.pages:
            return False
        return True

    def go_to_page(self, page: int) -> bool:
        """Load a page if it is in range; out-of-range requests are ignored.

        Returns:
            True if the page was loaded, False for a no-op.
        """
        if not self.can_go_to(page):
            return False
        return self.load(page)

    def next_page(self) -> bool:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.current_page - 1)
