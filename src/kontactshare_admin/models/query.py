# ABOUTME: Defines the query criteria for paginated profile listings.
# ABOUTME: Maps to the page, limit, search and status parameters of the list endpoint.

from typing import Annotated

from pydantic import BaseModel, Field

from kontactshare_admin.models.profile import ProfileStatus


class QueryState(BaseModel):
    """Pagination and filter criteria for a profile listing."""

    model_config = {"validate_assignment": True}

    page: Annotated[int, Field(ge=1, description="1-based page number")] = 1

    limit: Annotated[
        int, Field(ge=1, le=100, description="Profiles per page")
    ] = 20

    search: Annotated[
        str | None, Field(description="Free-text search over name, email, company")
    ] = None

    status: Annotated[
        ProfileStatus | None, Field(description="Only profiles with this status")
    ] = None
