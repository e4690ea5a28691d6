# ABOUTME: Stores package for pluggable profile persistence.
# ABOUTME: Exports the ProfileStore interface, remote and local backends, and the factory.

from kontactshare_admin.stores.base import ProfileStore
from kontactshare_admin.stores.exceptions import (
    DuplicateProfileError,
    ProfileNotFoundError,
    StoreError,
)
from kontactshare_admin.stores.factory import create_store
from kontactshare_admin.stores.local import LocalProfileStore
from kontactshare_admin.stores.remote import RemoteProfileStore

__all__ = [
    "DuplicateProfileError",
    "LocalProfileStore",
    "ProfileNotFoundError",
    "ProfileStore",
    "RemoteProfileStore",
    "StoreError",
    "create_store",
]
