"""Process-wide, fetch-once holder for Spotify credentials."""

import logging
import threading

from spotify_proxy.config import settings
from spotify_proxy.entities import SpotifyCredentials
from spotify_proxy.protocols import SecretStore

logger = logging.getLogger(__name__)


class CredentialsCache:
    """Single-assignment holder around a SecretStore.

    The first successful ``get()`` stores the credentials for the life of the
    process; there is no expiry or invalidation. A failed fetch leaves the
    holder empty so the next call tries again. Concurrent first calls are
    serialized by a lock, so the store is read at most once.
    """

    def __init__(self, store: SecretStore, secret_id: str | None = None) -> None:
        """Initialize the holder.

        Args:
            store: Backend the credentials are read from
            secret_id: Secret identifier. Defaults to settings.spotify_secret_id.
        """
        self._store = store
        self._secret_id = secret_id or settings.spotify_secret_id
        self._credentials: SpotifyCredentials | None = None
        self._lock = threading.Lock()

    @property
    def secret_id(self) -> str:
        return self._secret_id

    @property
    def is_loaded(self) -> bool:
        """Whether credentials have been fetched."""
        return self._credentials is not None

    def get(self) -> SpotifyCredentials:
        """Return the cached credentials, fetching them on first use.

        Raises:
            SecretStoreError: If the first fetch fails
        """
        credentials = self._credentials
        if credentials is not None:
            return credentials

        with self._lock:
            if self._credentials is None:
                logger.info("Fetching Spotify credentials from secret %s", self._secret_id)
                self._credentials = self._store.fetch(self._secret_id)
            return self._credentials
