"""Player API client protocol."""

from typing import Any, Protocol, runtime_checkable

from spotify_proxy.entities import PlayerResult


@runtime_checkable
class PlayerClient(Protocol):
    """Protocol for bearer-authenticated reads against the Spotify Web API."""

    async def get_json(
        self,
        access_token: str,
        url: str,
        params: dict[str, Any] | None = None,
    ) -> PlayerResult:
        """GET ``url`` and decode the answer.

        Args:
            access_token: Bearer token for the request
            url: Absolute endpoint URL
            params: Optional query parameters

        Returns:
            PlayerContent with the JSON body, or PlayerEmpty on 204

        Raises:
            PlayerApiError: If the request fails or the status is not 2xx
        """
        ...
