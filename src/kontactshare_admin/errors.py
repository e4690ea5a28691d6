# ABOUTME: Base exception classes for KontactShare admin errors.
# ABOUTME: Holds the root error type and client-side payload validation failures.


class KontactShareError(Exception):
    """Base exception for all KontactShare admin errors.

    This is the root exception class for the application. All custom
    exceptions inherit from this class so the CLI can handle them in
    one place.
    """

    pass


class PayloadValidationError(KontactShareError):
    """Exception raised when a payload fails client-side validation.

    Raised before any network call is made.

    Attributes:
        fields: Names of the fields that failed validation.
    """

    def __init__(self, message: str, fields: list[str] | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable description of the problem.
            fields: Names of the offending fields.
        """
        super().__init__(message)
        self.fields = fields or []
