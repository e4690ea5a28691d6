# ABOUTME: Exception classes raised by profile stores that do not go over HTTP.
# ABOUTME: Covers unknown unique codes and duplicate unique codes.

from kontactshare_admin.errors import KontactShareError


class StoreError(KontactShareError):
    """Base exception for profile store errors."""

    pass


class ProfileNotFoundError(StoreError):
    """Exception raised when no profile has the requested unique code."""

    def __init__(self, unique_code: str) -> None:
        super().__init__(f"Profile '{unique_code}' not found")
        self.unique_code = unique_code


class DuplicateProfileError(StoreError):
    """Exception raised when creating a profile whose unique code is taken."""

    def __init__(self, unique_code: str) -> None:
        super().__init__(f"A profile with unique code '{unique_code}' already exists")
        self.unique_code = unique_code
