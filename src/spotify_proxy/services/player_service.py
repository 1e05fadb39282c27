"""Player service: credentials, token refresh and the two player reads."""

import asyncio
from typing import Any

from spotify_proxy.config import settings
from spotify_proxy.dto import NowPlayingEmptyResponse, RecentEmptyResponse
from spotify_proxy.entities import PlayerEmpty
from spotify_proxy.protocols import PlayerClient, TokenRefresher

from .credentials_cache import CredentialsCache


class PlayerService:
    """Core proxy orchestration service.

    Every request obtains a fresh access token; only the long-lived
    credentials are cached (by ``CredentialsCache``).

    Example:
        ```python
        service = PlayerService.create(credentials, refresher, player)
        token = await service.access_token()
        payload = await service.now_playing(token)
        ```
    """

    def __init__(
        self,
        credentials: CredentialsCache,
        token_refresher: TokenRefresher,
        player_client: PlayerClient,
        now_playing_url: str | None = None,
        recently_played_url: str | None = None,
        recent_limit: int | None = None,
    ) -> None:
        """Initialize the player service.

        Args:
            credentials: Fetch-once credentials holder (required).
            token_refresher: Refresh-token exchanger (required).
            player_client: Spotify Web API reader (required).
            now_playing_url: Currently-playing endpoint. Defaults to settings.
            recently_played_url: Recently-played endpoint. Defaults to settings.
            recent_limit: Number of recent tracks to request. Defaults to settings.
        """
        self._credentials = credentials
        self._tokens = token_refresher
        self._player = player_client
        self._now_playing_url = now_playing_url or settings.now_playing_url
        self._recently_played_url = recently_played_url or settings.recently_played_url
        self._recent_limit = recent_limit or settings.spotify_recent_limit

    @classmethod
    def create(
        cls,
        credentials: CredentialsCache,
        token_refresher: TokenRefresher,
        player_client: PlayerClient,
    ) -> "PlayerService":
        """Factory method to create PlayerService with URLs from settings."""
        return cls(
            credentials=credentials,
            token_refresher=token_refresher,
            player_client=player_client,
        )

    async def access_token(self) -> str:
        """Resolve credentials and exchange the refresh token.

        The secret-store read is blocking (boto3), so it runs in a worker
        thread; after the first call it is a plain cache hit.

        Returns:
            A fresh access token
        """
        credentials = await asyncio.to_thread(self._credentials.get)
        return await self._tokens.refresh(credentials)

    async def now_playing(self, access_token: str) -> Any:
        """Read the currently playing item.

        Returns:
            The upstream JSON, or ``{"ok": true, "data": {"item": null}}``
            when nothing is playing
        """
        result = await self._player.get_json(access_token, self._now_playing_url)
        if isinstance(result, PlayerEmpty):
            return NowPlayingEmptyResponse().model_dump()
        return result.data

    async def recently_played(self, access_token: str) -> Any:
        """Read the recently played tracks.

        Returns:
            The upstream JSON, or ``{"items": []}`` when there is no history
        """
        result = await self._player.get_json(
            access_token,
            self._recently_played_url,
            params={"limit": self._recent_limit},
        )
        if isinstance(result, PlayerEmpty):
            return RecentEmptyResponse().model_dump()
        return result.data

    @property
    def credentials(self) -> CredentialsCache:
        """Get the credentials holder (for testing)."""
        return self._credentials
