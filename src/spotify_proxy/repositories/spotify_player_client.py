"""Spotify Web API implementation of PlayerClient."""

from typing import Any

import httpx

from spotify_proxy.entities import PlayerContent, PlayerEmpty, PlayerResult
from spotify_proxy.errors import PlayerApiError


class SpotifyPlayerClient:
    """httpx implementation of the PlayerClient protocol.

    A 204 answer (nothing playing, no history) is a normal outcome and is
    returned as ``PlayerEmpty`` rather than raised.

    Example:
        ```python
        player = SpotifyPlayerClient.create(client=httpx.AsyncClient())
        result = await player.get_json(token, settings.now_playing_url)
        if isinstance(result, PlayerEmpty):
            ...
        ```
    """

    def __init__(self, client: httpx.AsyncClient) -> None:
        """Initialize the player client.

        Args:
            client: Shared async HTTP client
        """
        self._client = client

    @classmethod
    def create(cls, client: httpx.AsyncClient) -> "SpotifyPlayerClient":
        """Factory method to create SpotifyPlayerClient."""
        return cls(client=client)

    async def get_json(
        self,
        access_token: str,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> PlayerResult:
        """GET ``url`` with a bearer token.

        Args:
            access_token: Bearer token for the request
            url: Absolute endpoint URL
            params: Optional query parameters

        Returns:
            PlayerEmpty on 204, otherwise PlayerContent with the decoded body

        Raises:
            PlayerApiError: On transport errors, non-2xx status, or invalid JSON
        """
        headers = {"Authorization": f"Bearer {access_token}"}

        try:
            response = await self._client.get(url, headers=headers, params=params)
            if response.status_code == httpx.codes.NO_CONTENT:
                return PlayerEmpty()
            response.raise_for_status()
            return PlayerContent(data=response.json())
        except httpx.HTTPStatusError as e:
            raise PlayerApiError(
                f"Spotify API {url} returned status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise PlayerApiError(f"Spotify API request failed: {e}") from e
        except ValueError as e:
            raise PlayerApiError(f"Spotify API {url} returned invalid JSON") from e
