# ABOUTME: SQLModel table for profiles kept by the local prototype store.
# ABOUTME: Mirrors the service's profile fields with server-style timestamps.

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel

from kontactshare_admin.models.profile import Profile, ProfileStatus


def _utcnow() -> datetime:
    return datetime.now(UTC)


class StoredProfile(SQLModel, table=True):
    """A profile row in the local SQLite store."""

    __tablename__ = "profiles"

    row_id: int | None = Field(default=None, primary_key=True)
    unique_code: str = Field(index=True, unique=True)
    id: str = ""
    pin: str = ""
    profile_photo: str | None = None
    full_name: str = Field(default="", index=True)
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

    status: ProfileStatus = Field(default=ProfileStatus.ACTIVE, index=True)
    created_at: datetime = Field(default_factory=_utcnow, index=True)
    updated_at: datetime = Field(default_factory=_utcnow)

    def to_profile(self) -> Profile:
        """Convert the row into the service-facing Profile model."""
        return Profile.model_validate(self.model_dump(exclude={"row_id"}))
