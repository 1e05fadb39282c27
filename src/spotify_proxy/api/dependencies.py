"""Composition root and dependency injection for the proxy.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Handler built during lifespan and stored in app.state
    - Dependency functions retrieve it from request.app.state
    - ``build_player_handler`` is shared with the Lambda entry point
"""

import logging
from contextlib import asynccontextmanager
from typing import Annotated

import httpx
from fastapi import Depends, FastAPI, Request

from spotify_proxy.config import configure_logging, settings
from spotify_proxy.handlers import PlayerHandler
from spotify_proxy.repositories import (
    SecretsManagerStore,
    SpotifyPlayerClient,
    SpotifyTokenRefresher,
)
from spotify_proxy.services import CredentialsCache, PlayerService

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Create the async HTTP client shared by all Spotify calls."""
    if settings.spotify_http_timeout is not None:
        return httpx.AsyncClient(timeout=settings.spotify_http_timeout)
    return httpx.AsyncClient()


def build_player_handler(
    http_client: httpx.AsyncClient,
    credentials: CredentialsCache | None = None,
) -> PlayerHandler:
    """Wire repositories, services and the handler together.

    Args:
        http_client: Client used for the token exchange and the player reads
        credentials: Credentials holder. If None, one backed by Secrets
            Manager is created.

    Returns:
        A ready PlayerHandler
    """
    credentials = credentials or CredentialsCache(store=SecretsManagerStore.create())
    player_service = PlayerService.create(
        credentials=credentials,
        token_refresher=SpotifyTokenRefresher.create(client=http_client),
        player_client=SpotifyPlayerClient.create(client=http_client),
    )
    return PlayerHandler(player_service=player_service)


def get_handler(request: Request) -> PlayerHandler:
    """Dependency injection for PlayerHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The PlayerHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "player_handler", None)
    if handler is None:
        raise RuntimeError("PlayerHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Creates the shared HTTP client and the handler, stores them in
    app.state, and closes the client on shutdown. A handler already placed
    in app.state is left alone.
    """
    configure_logging()

    http_client = None
    if getattr(app.state, "player_handler", None) is None:
        http_client = create_http_client()
        app.state.http_client = http_client
        app.state.player_handler = build_player_handler(http_client)

    logger.info("Spotify proxy started (secret id: %s)", settings.spotify_secret_id)

    yield

    if http_client is not None:
        await http_client.aclose()
        del app.state.player_handler
        del app.state.http_client
    logger.info("Spotify proxy shut down")


# Type alias for cleaner dependency injection
HandlerDep = Annotated[PlayerHandler, Depends(get_handler)]
