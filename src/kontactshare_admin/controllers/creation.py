# ABOUTME: Workflow for creating a profile from a pre-filled, editable form.
# ABOUTME: Generates credentials, validates client-side, submits, and exposes the share link.

from collections.abc import Callable
from enum import Enum

from kontactshare_admin.credentials import (
    generate_id_card,
    generate_pin,
    generate_unique_code,
    is_valid_pin,
)
from kontactshare_admin.errors import KontactShareError, PayloadValidationError
from kontactshare_admin.logging import get_logger
from kontactshare_admin.models.profile import CreatedProfile, ProfilePayload
from kontactshare_admin.stores.base import ProfileStore

logger = get_logger(__name__)

DEFAULT_FORM: dict[str, str] = {
    "id": "",
    "pin": "",
    "unique_code": "",
    "profile_photo": "/uploads/kontacksharelogo.png",
    "full_name": "Default Name",
    "email": "default@example.com",
    "job_title": "Default Job Title",
    "company_name": "Default Company",
    "mobile_primary": "000-000-0000",
    "landline_number": "000-000-0000",
    "address": "Default Address",
    "facebook_link": "Update your Facebook Link",
    "instagram_link": "Update your Instagram Link",
    "tiktok_link": "Update your TikTok Link",
    "whatsapp_number": "Update your WhatsApp Number",
    "website_link": "Update your web link",
}

REQUIRED_FIELDS = ("full_name", "email", "job_title", "company_name")

PLACEHOLDER_VALUES = frozenset(value for value in DEFAULT_FORM.values() if value)


def default_payload() -> ProfilePayload:
    """Build a payload holding the form's placeholder values."""
    return ProfilePayload(**DEFAULT_FORM)


def is_default_value(value: str | None) -> bool:
    """Whether a field still holds one of the form's placeholder values."""
    return bool(value) and value in PLACEHOLDER_VALUES


class CreationState(str, Enum):
    """Stages of the creation workflow."""

    EDITING = "editing"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class WorkflowStateError(KontactShareError):
    """Exception raised when an operation is not allowed in the current state."""

    pass


class ProfileCreationWorkflow:
    """Assembles a new profile and submits it to a store.

    The form starts with placeholder values. The store receives exactly
    what is in the form at submit time. A failed submission keeps every
    field so the operator can fix and resubmit.
    """

    GENERATORS: dict[str, Callable[[], str]] = {
        "id": generate_id_card,
        "pin": generate_pin,
        "unique_code": generate_unique_code,
    }

    def __init__(
        self,
        store: ProfileStore,
        on_success: Callable[[CreatedProfile], None] | None = None,
    ) -> None:
        """Initialize the workflow.

        Args:
            store: Profile store receiving the new profile.
            on_success: Called with the created profile, e.g. to refresh listings.
        """
        self._store = store
        self._on_success = on_success
        self.form = default_payload()
        self.state = CreationState.EDITING
        self.error: str | None = None
        self.result: CreatedProfile | None = None

    @property
    def profile_link(self) -> str | None:
        return self.result.profile_link if self.result is not None else None

    def _ensure_editable(self) -> None:
        if self.state in (CreationState.SUBMITTING, CreationState.SUCCEEDED):
            raise WorkflowStateError(f"Cannot edit the form while {self.state.value}")
        if self.state == CreationState.FAILED:
            self.state = CreationState.EDITING

    def update(self, **fields: str | None) -> None:
        """Overwrite form fields by name.

        Raises:
            ValueError: If a field name is not a profile field.
            WorkflowStateError: If the workflow is submitting or finished.
        """
        unknown = set(fields) - set(ProfilePayload.model_fields)
        if unknown:
            raise ValueError(f"Unknown profile field(s): {', '.join(sorted(unknown))}")
        self._ensure_editable()
        self.form = self.form.model_copy(update=fields)

    def regenerate(self, field: str) -> str:
        """Replace one generated credential (id, pin or unique_code).

        Returns:
            The newly generated value.
        """
        if field not in self.GENERATORS:
            raise ValueError(f"'{field}' is not a generated field")
        self._ensure_editable()
        value = self.GENERATORS[field]()
        self.form = self.form.model_copy(update={field: value})
        return value

    def generate_all(self) -> None:
        """Regenerate id, pin and unique code together."""
        self._ensure_editable()
        self.form = self.form.model_copy(
            update={field: generate() for field, generate in self.GENERATORS.items()}
        )

    def validate(self) -> None:
        """Check the form before it is sent.

        Raises:
            PayloadValidationError: Listing every field that failed.
        """
        problems: dict[str, str] = {}
        if not is_valid_pin(self.form.pin):
            problems["pin"] = "PIN must be exactly 5 digits from 10000 to 99999"
        if not self.form.unique_code.strip():
            problems["unique_code"] = "Unique code is required"
        for field in REQUIRED_FIELDS:
            if not getattr(self.form, field).strip():
                problems[field] = f"{field.replace('_', ' ').capitalize()} is required"

        if problems:
            raise PayloadValidationError("; ".join(problems.values()), fields=list(problems))

    def submit(self) -> CreatedProfile:
        """Validate and submit the form.

        Returns:
            The created profile's credentials and share link.

        Raises:
            PayloadValidationError: If the form is invalid; nothing is sent.
            KontactShareError: If the store rejects the profile.
            WorkflowStateError: If the workflow is submitting or finished.
        """
        self._ensure_editable()
        try:
            self.validate()
        except PayloadValidationError as e:
            self.error = str(e)
            raise

        self.state = CreationState.SUBMITTING
        self.error = None
        try:
            result = self._store.create(self.form)
        except KontactShareError as e:
            self.state = CreationState.FAILED
            self.error = str(e)
            logger.warning("profile_create_failed", error=str(e))
            raise

        self.result = result
        self.state = CreationState.SUCCEEDED
        if self._on_success is not None:
            self._on_success(result)
        return result

    def reset(self) -> None:
        """Start over with a fresh placeholder form."""
        self.form = default_payload()
        self.state = CreationState.EDITING
        self.error = None
        self.result = None
