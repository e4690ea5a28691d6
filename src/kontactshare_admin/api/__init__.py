# ABOUTME: API package for talking to the KontactShare profile service.
# ABOUTME: Exports GatewayClient, response mappers and the gateway exception types.

from kontactshare_admin.api.client import GatewayClient
from kontactshare_admin.api.exceptions import (
    GatewayError,
    NetworkFailure,
    RemoteError,
    UnauthenticatedError,
)
from kontactshare_admin.api.mapper import build_profile_link

__all__ = [
    "GatewayClient",
    "GatewayError",
    "NetworkFailure",
    "RemoteError",
    "UnauthenticatedError",
    "build_profile_link",
]
