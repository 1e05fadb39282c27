"""Request handler for the player proxy.

Routes on the path suffix, sets status codes, and collapses every failure
into a generic server error.
"""

import logging

from spotify_proxy.dto import ErrorResponse
from spotify_proxy.entities import ProxyResponse
from spotify_proxy.services import PlayerService

logger = logging.getLogger(__name__)

NOW_PLAYING_SUFFIX = "/nowplaying"
RECENT_SUFFIX = "/recent"


class PlayerHandler:
    """Handles ``.../nowplaying`` and ``.../recent`` requests.

    Example:
        ```python
        handler = PlayerHandler(player_service=service)
        response = await handler.handle("/prod/spotify/nowplaying")
        response.status_code  # 200
        ```
    """

    def __init__(self, player_service: PlayerService) -> None:
        """Initialize the handler.

        Args:
            player_service: The player service for business logic (required).
        """
        self._player = player_service

    async def handle(self, path: str, method: str = "GET") -> ProxyResponse:
        """Handle one inbound request.

        A fresh access token is obtained before routing, so every GET costs
        exactly one token exchange whichever route it hits. Other methods are
        answered 404 without any outbound call.

        Args:
            path: Request path; only its suffix is inspected (case-insensitive)
            method: HTTP method

        Returns:
            ProxyResponse with the status code and JSON body
        """
        if method.upper() != "GET":
            return self._not_found()

        try:
            token = await self._player.access_token()

            route = path.lower()
            if route.endswith(NOW_PLAYING_SUFFIX):
                return ProxyResponse(200, await self._player.now_playing(token))
            if route.endswith(RECENT_SUFFIX):
                return ProxyResponse(200, await self._player.recently_played(token))
            return self._not_found()

        except Exception:
            logger.exception("Failed to handle %s %s", method, path)
            return ProxyResponse(500, ErrorResponse.server_error().model_dump())

    @staticmethod
    def _not_found() -> ProxyResponse:
        return ProxyResponse(404, ErrorResponse.not_found().model_dump())
