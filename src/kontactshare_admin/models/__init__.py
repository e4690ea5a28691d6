# ABOUTME: Models package for KontactShare admin data structures.
# ABOUTME: Exports profile wire models, query state and the local StoredProfile table.

from kontactshare_admin.models.profile import (
    BulkAction,
    BulkItemResult,
    BulkResult,
    CreatedProfile,
    DashboardStats,
    Pagination,
    Profile,
    ProfilePage,
    ProfilePayload,
    ProfileStatus,
)
from kontactshare_admin.models.query import QueryState
from kontactshare_admin.models.stored_profile import StoredProfile

__all__ = [
    "BulkAction",
    "BulkItemResult",
    "BulkResult",
    "CreatedProfile",
    "DashboardStats",
    "Pagination",
    "Profile",
    "ProfilePage",
    "ProfilePayload",
    "ProfileStatus",
    "QueryState",
    "StoredProfile",
]
