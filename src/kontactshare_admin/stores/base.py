# ABOUTME: Abstract profile store interface shared by the remote and local backends.
# ABOUTME: Controllers depend on this interface rather than on a concrete backend.

from abc import ABC, abstractmethod

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


class ProfileStore(ABC):
    """Abstract base class for profile persistence backends."""

    @abstractmethod
    def create(self, payload: ProfilePayload) -> CreatedProfile:
        """
        Create a profile exactly as given.

        Args:
            payload: Complete profile payload, generated credentials included

        Returns:
            The created profile's credentials and shareable link
        """
        ...

    @abstractmethod
    def list_profiles(self, query: QueryState) -> ProfilePage:
        """
        Fetch one page of profiles matching the query.

        Args:
            query: Page, page size, search text and status filter

        Returns:
            The matching profiles with pagination metadata
        """
        ...

    @abstractmethod
    def get(self, unique_code: str) -> Profile:
        """Fetch the public view of one profile."""
        ...

    @abstractmethod
    def set_status(self, unique_code: str, status: ProfileStatus) -> None:
        """Ban or unban one profile."""
        ...

    @abstractmethod
    def delete(self, unique_code: str) -> None:
        """Irreversibly delete one profile."""
        ...

    @abstractmethod
    def bulk(self, action: BulkAction, unique_codes: list[str]) -> BulkResult:
        """
        Apply one action to a batch of profiles.

        Args:
            action: ban, unban or delete
            unique_codes: Profiles to act on

        Returns:
            Per-profile outcome of the action
        """
        ...

    @abstractmethod
    def stats(self) -> DashboardStats:
        """Aggregate profile counts for the dashboard."""
        ...

    def close(self) -> None:
        """Release connections and resources."""
        return None

    def __enter__(self) -> "ProfileStore":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
