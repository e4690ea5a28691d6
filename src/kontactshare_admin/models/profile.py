# ABOUTME: Pydantic models for profiles and the payloads exchanged with the profile service.
# ABOUTME: Accepts both snake_case and camelCase keys and serializes payloads in camelCase.

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProfileStatus(str, Enum):
    """Lifecycle state of a profile."""

    ACTIVE = "active"
    BANNED = "banned"


class BulkAction(str, Enum):
    """Actions that can be applied to a batch of profiles."""

    BAN = "ban"
    UNBAN = "unban"
    DELETE = "delete"

    @property
    def past_tense(self) -> str:
        return {"ban": "banned", "unban": "unbanned", "delete": "deleted"}[self.value]


class WireModel(BaseModel):
    """Base for models whose wire keys are camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict[str, Any]:
        """Serialize to the camelCase JSON shape the service expects."""
        return self.model_dump(mode="json", by_alias=True)


class ProfileFields(WireModel):
    """Editable fields shared by stored profiles and create payloads."""

    id: str = ""
    pin: str = ""
    unique_code: str = ""
    profile_photo: str | None = None
    full_name: str = ""
    email: str = ""
    job_title: str = ""
    company_name: str = ""
    mobile_primary: str = ""
    landline_number: str = ""
    address: str = ""
    facebook_link: str = ""
    instagram_link: str = ""
    tiktok_link: str = ""
    whatsapp_number: str = ""
    website_link: str = ""


class ProfilePayload(ProfileFields):
    """Body of a create-profile request."""

    pass


class Profile(ProfileFields):
    """A managed contact-sharing profile as returned by the service."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    status: ProfileStatus | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_banned(self) -> bool:
        return self.status == ProfileStatus.BANNED


class CreatedProfile(WireModel):
    """Response of a successful create-profile request."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    id: str = ""
    pin: str = ""
    unique_code: str = ""
    profile_link: str | None = None


class Pagination(BaseModel):
    """Paging metadata for a profile listing."""

    page: Annotated[int, Field(ge=1)] = 1
    limit: Annotated[int, Field(ge=1)] = 20
    total: Annotated[int, Field(ge=0)] = 0
    pages: Annotated[int, Field(ge=0)] = 0

    @property
    def first_index(self) -> int:
        """1-based index of the first profile on this page."""
        if self.total == 0:
            return 0
        return (self.page - 1) * self.limit + 1

    @property
    def last_index(self) -> int:
        """1-based index of the last profile on this page."""
        return min(self.page * self.limit, self.total)


class ProfilePage(BaseModel):
    """One page of profiles with its pagination metadata."""

    profiles: list[Profile] = Field(default_factory=list)
    pagination: Pagination = Field(default_factory=Pagination)


class DashboardStats(WireModel):
    """Aggregate profile counts shown on the dashboard."""

    total_profiles: int = 0
    active_profiles: int = 0
    banned_profiles: int = 0
    today_profiles: int = 0
    week_profiles: int = 0


class BulkItemResult(WireModel):
    """Outcome of a bulk action for a single profile."""

    unique_code: str
    ok: bool = True
    error: str | None = None


class BulkResult(BaseModel):
    """Outcome of a bulk action across all requested profiles."""

    action: BulkAction
    requested: list[str]
    results: list[BulkItemResult] = Field(default_factory=list)

    @property
    def succeeded(self) -> list[str]:
        return [item.unique_code for item in self.results if item.ok]

    @property
    def failed(self) -> list[BulkItemResult]:
        return [item for item in self.results if not item.ok]
