"""Token refresher protocol."""

from typing import Protocol, runtime_checkable

from spotify_proxy.entities import SpotifyCredentials


@runtime_checkable
class TokenRefresher(Protocol):
    """Protocol for exchanging a refresh token for an access token."""

    async def refresh(self, credentials: SpotifyCredentials) -> str:
        """Exchange the refresh token for a fresh access token.

        Args:
            credentials: Client id, client secret and refresh token

        Returns:
            The bearer access token

        Raises:
            TokenRefreshError: If the exchange fails
        """
        ...
