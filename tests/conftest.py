"""Shared fakes and fixtures for the proxy tests."""

from typing import Any

import pytest

from spotify_proxy.entities import PlayerContent, PlayerEmpty, PlayerResult, SpotifyCredentials
from spotify_proxy.errors import SecretNotFoundError, TokenRefreshError
from spotify_proxy.handlers import PlayerHandler
from spotify_proxy.services import CredentialsCache, PlayerService

NOW_PLAYING_URL = "https://api.test/v1/me/player/currently-playing"
RECENT_URL = "https://api.test/v1/me/player/recently-played"

CREDENTIALS = SpotifyCredentials(
    client_id="client-id",
    client_secret="client-secret",
    refresh_token="refresh-token",
)


class FakeSecretStore:
    """In-memory SecretStore that counts reads."""

    def __init__(self, credentials: SpotifyCredentials | None = CREDENTIALS, error: Exception | None = None):
        self.credentials = credentials
        self.error = error
        self.calls: list[str] = []

    def fetch(self, secret_id: str) -> SpotifyCredentials:
        self.calls.append(secret_id)
        if self.error is not None:
            raise self.error
        return self.credentials


class FakeTokenRefresher:
    """TokenRefresher that hands out numbered tokens."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = 0

    async def refresh(self, credentials: SpotifyCredentials) -> str:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return f"token-{self.calls}"


class FakePlayerClient:
    """PlayerClient answering from a url -> result mapping."""

    def __init__(self, results: dict[str, PlayerResult] | None = None, error: Exception | None = None):
        self.results = results or {}
        self.error = error
        self.calls: list[tuple[str, str, dict[str, Any] | None]] = []

    async def get_json(self, access_token: str, url: str, params: dict[str, Any] | None = None) -> PlayerResult:
        self.calls.append((access_token, url, params))
        if self.error is not None:
            raise self.error
        return self.results.get(url, PlayerEmpty())


def make_handler(
    store: FakeSecretStore,
    refresher: FakeTokenRefresher,
    player: FakePlayerClient,
) -> PlayerHandler:
    service = PlayerService(
        credentials=CredentialsCache(store=store, secret_id="spotify/test"),
        token_refresher=refresher,
        player_client=player,
        now_playing_url=NOW_PLAYING_URL,
        recently_played_url=RECENT_URL,
        recent_limit=8,
    )
    return PlayerHandler(player_service=service)


@pytest.fixture
def store():
    return FakeSecretStore()


@pytest.fixture
def refresher():
    return FakeTokenRefresher()


@pytest.fixture
def player():
    return FakePlayerClient()


@pytest.fixture
def handler(store, refresher, player):
    return make_handler(store, refresher, player)


@pytest.fixture
def failing_secret_store():
    return FakeSecretStore(error=SecretNotFoundError("Secret not found: spotify/test"))


@pytest.fixture
def failing_refresher():
    return FakeTokenRefresher(error=TokenRefreshError("Token exchange failed with status 400"))


@pytest.fixture
def track():
    return PlayerContent(data={"is_playing": True, "item": {"name": "Song", "id": "abc"}})
