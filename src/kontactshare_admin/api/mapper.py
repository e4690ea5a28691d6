# ABOUTME: Maps raw profile service responses to the package's pydantic models.
# ABOUTME: Handles missing bodies, snake/camel key variants and per-item bulk results.

from typing import Any

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
)


def build_profile_link(public_base_url: str, unique_code: str) -> str:
    """Build the shareable public link for a profile.

    Args:
        public_base_url: Base URL of the public profile site.
        unique_code: The profile's unique code.

    Returns:
        Link in the form <public base>/myprofile/<uniqueCode>.
    """
    return f"{public_base_url.rstrip('/')}/myprofile/{unique_code}"


def map_profile(data: dict[str, Any]) -> Profile:
    return Profile.model_validate(data)


def map_profile_page(data: dict[str, Any] | None, limit: int = 20) -> ProfilePage:
    """Map a list response to a ProfilePage.

    Args:
        data: Raw response with "profiles" and "pagination" keys, or None.
        limit: Page size to assume when the response carries no pagination.

    Returns:
        ProfilePage; empty when the response had no content.
    """
    if not data:
        return ProfilePage(pagination=Pagination(limit=limit))

    profiles = [map_profile(item) for item in data.get("profiles") or []]
    raw_pagination = data.get("pagination")
    if raw_pagination:
        pagination = Pagination.model_validate(raw_pagination)
    else:
        pagination = Pagination(
            limit=limit,
            total=len(profiles),
            pages=1 if profiles else 0,
        )
    return ProfilePage(profiles=profiles, pagination=pagination)


def map_created_profile(
    data: dict[str, Any] | None,
    payload: ProfilePayload,
    public_base_url: str,
) -> CreatedProfile:
    """Map a create response, filling gaps from the submitted payload.

    The service may omit fields it echoed back unchanged; the submitted
    credentials and a locally built link stand in for them.
    """
    created = CreatedProfile.model_validate(data or {})
    if not created.id:
        created.id = payload.id
    if not created.pin:
        created.pin = payload.pin
    if not created.unique_code:
        created.unique_code = payload.unique_code
    if not created.profile_link:
        created.profile_link = build_profile_link(public_base_url, created.unique_code)
    return created


def map_dashboard_stats(data: dict[str, Any] | None) -> DashboardStats:
    return DashboardStats.model_validate(data or {})


def map_bulk_result(
    action: BulkAction,
    unique_codes: list[str],
    data: Any,
) -> BulkResult:
    """Map a bulk response to a BulkResult.

    When the service reports per-item outcomes under "results" they are
    used as-is. Otherwise the whole request succeeded and every code is
    reported as ok.
    """
    items: list[BulkItemResult]
    raw_items = data.get("results") if isinstance(data, dict) else None
    if isinstance(raw_items, list):
        items = [BulkItemResult.model_validate(item) for item in raw_items]
    else:
        items = [BulkItemResult(unique_code=code, ok=True) for code in unique_codes]
    return BulkResult(action=action, requested=list(unique_codes), results=items)
