# ABOUTME: Auth package for admin session management.
# ABOUTME: Provides token stores (OS keyring, in-memory) and the AdminSession lifecycle.

from kontactshare_admin.auth.session import AdminSession
from kontactshare_admin.auth.token_store import (
    KeyringTokenStore,
    MemoryTokenStore,
    TokenStore,
)

__all__ = ["AdminSession", "KeyringTokenStore", "MemoryTokenStore", "TokenStore"]
