"""Spotify accounts-service implementation of TokenRefresher.

Performs the OAuth2 refresh-token grant:

    POST https://accounts.spotify.com/api/token
    grant_type=refresh_token&refresh_token=...&client_id=...&client_secret=...
"""

import httpx

from spotify_proxy.config import settings
from spotify_proxy.entities import SpotifyCredentials
from spotify_proxy.errors import TokenRefreshError


class SpotifyTokenRefresher:
    """httpx implementation of the TokenRefresher protocol.

    This class satisfies the TokenRefresher protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        token_url: str | None = None,
    ) -> None:
        """Initialize the refresher.

        Args:
            client: Shared async HTTP client
            token_url: Token endpoint. Defaults to settings.spotify_token_url.
        """
        self._client = client
        self._token_url = token_url or settings.spotify_token_url

    @classmethod
    def create(
        cls,
        client: httpx.AsyncClient,
        token_url: str | None = None,
    ) -> "SpotifyTokenRefresher":
        """Factory method to create SpotifyTokenRefresher with defaults."""
        return cls(client=client, token_url=token_url)

    async def refresh(self, credentials: SpotifyCredentials) -> str:
        """Exchange the refresh token for a new access token.

        Args:
            credentials: Client id, client secret and refresh token

        Returns:
            The access token

        Raises:
            TokenRefreshError: On transport errors, non-success status, or a
                body without ``access_token``
        """
        form = {
            "grant_type": "refresh_token",
            "refresh_token": credentials.refresh_token,
            "client_id": credentials.client_id,
            "client_secret": credentials.client_secret,
        }

        try:
            response = await self._client.post(self._token_url, data=form)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            raise TokenRefreshError(
                f"Token exchange failed with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TokenRefreshError(f"Token exchange request failed: {e}") from e
        except ValueError as e:
            raise TokenRefreshError("Token endpoint returned invalid JSON") from e

        token = data.get("access_token") if isinstance(data, dict) else None
        if not token:
            raise TokenRefreshError("Token endpoint response has no access_token")
        return token
