# ABOUTME: Custom exceptions for profile service API operations.
# ABOUTME: Separates missing/rejected credentials, error responses and transport failures.

from kontactshare_admin.errors import KontactShareError


class GatewayError(KontactShareError):
    """Base exception for all profile service API errors.

    Attributes:
        status_code: HTTP status of the failed response, if one was received.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UnauthenticatedError(GatewayError):
    """Exception raised when no session token is stored or the service rejects it."""

    pass


class RemoteError(GatewayError):
    """Exception raised when the service answers with a non-2xx status."""

    pass


class NetworkFailure(GatewayError):
    """Exception raised when a request could not be completed."""

    pass
