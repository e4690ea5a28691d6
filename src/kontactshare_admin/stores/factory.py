# ABOUTME: Builds the configured profile store backend from settings.
# ABOUTME: Wires GatewayClient and the token store for remote, or SQLite for local.

from kontactshare_admin.api.client import GatewayClient
from kontactshare_admin.auth.token_store import TokenStore
from kontactshare_admin.config import Settings, StoreBackend
from kontactshare_admin.stores.base import ProfileStore
from kontactshare_admin.stores.local import LocalProfileStore
from kontactshare_admin.stores.remote import RemoteProfileStore


def create_store(settings: Settings, token_store: TokenStore) -> ProfileStore:
    """Create the profile store selected by settings.backend.

    Args:
        settings: Application settings.
        token_store: Session token source for the remote backend.

    Returns:
        A ready-to-use ProfileStore.
    """
    if settings.backend == StoreBackend.LOCAL:
        store = LocalProfileStore(
            db_path=settings.local_db_path,
            public_base_url=settings.public_base_url,
        )
        store.init_db()
        return store

    client = GatewayClient.from_settings(settings, token_store)
    return RemoteProfileStore(client, settings.public_base_url)
