"""
Tests for the httpx-backed token refresher and player client.
"""

import asyncio
from urllib.parse import parse_qs

import httpx
import pytest

from conftest import CREDENTIALS
from spotify_proxy.entities import PlayerContent, PlayerEmpty
from spotify_proxy.errors import PlayerApiError, TokenRefreshError
from spotify_proxy.repositories import SpotifyPlayerClient, SpotifyTokenRefresher

TOKEN_URL = "https://accounts.spotify.com/api/token"
NOW_PLAYING_URL = "https://api.spotify.com/v1/me/player/currently-playing"
RECENT_URL = "https://api.spotify.com/v1/me/player/recently-played"


def mock_client(handler):
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def refresh_with(handler):
    async def go():
        async with mock_client(handler) as client:
            refresher = SpotifyTokenRefresher.create(client=client, token_url=TOKEN_URL)
            return await refresher.refresh(CREDENTIALS)

    return asyncio.run(go())


def get_with(handler, url, params=None):
    async def go():
        async with mock_client(handler) as client:
            player = SpotifyPlayerClient.create(client=client)
            return await player.get_json("access-token", url, params=params)

    return asyncio.run(go())


def test_refresh_posts_form_and_returns_token():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["url"] = str(request.url)
        seen["content_type"] = request.headers["content-type"]
        seen["form"] = parse_qs(request.content.decode())
        return httpx.Response(200, json={"access_token": "fresh", "token_type": "Bearer", "expires_in": 3600})

    assert refresh_with(handler) == "fresh"
    assert seen["method"] == "POST"
    assert seen["url"] == TOKEN_URL
    assert seen["content_type"] == "application/x-www-form-urlencoded"
    assert seen["form"] == {
        "grant_type": ["refresh_token"],
        "refresh_token": ["refresh-token"],
        "client_id": ["client-id"],
        "client_secret": ["client-secret"],
    }


def test_refresh_rejects_error_status():
    def handler(request):
        return httpx.Response(400, json={"error": "invalid_grant"})

    with pytest.raises(TokenRefreshError, match="status 400"):
        refresh_with(handler)


def test_refresh_requires_access_token():
    def handler(request):
        return httpx.Response(200, json={"token_type": "Bearer"})

    with pytest.raises(TokenRefreshError, match="no access_token"):
        refresh_with(handler)


def test_refresh_wraps_transport_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(TokenRefreshError, match="request failed"):
        refresh_with(handler)


def test_get_json_sends_bearer_and_decodes_body():
    seen = {}

    def handler(request):
        seen["auth"] = request.headers["authorization"]
        return httpx.Response(200, json={"is_playing": True, "item": {"name": "Song"}})

    result = get_with(handler, NOW_PLAYING_URL)

    assert result == PlayerContent(data={"is_playing": True, "item": {"name": "Song"}})
    assert seen["auth"] == "Bearer access-token"


def test_get_json_passes_query_params():
    seen = {}

    def handler(request):
        seen["url"] = request.url
        return httpx.Response(200, json={"items": []})

    get_with(handler, RECENT_URL, params={"limit": 8})

    assert seen["url"].path == "/v1/me/player/recently-played"
    assert seen["url"].params["limit"] == "8"


def test_get_json_no_content_is_empty():
    def handler(request):
        return httpx.Response(204)

    assert get_with(handler, NOW_PLAYING_URL) == PlayerEmpty()


def test_get_json_error_status_raises():
    def handler(request):
        return httpx.Response(401, json={"error": {"status": 401, "message": "The access token expired"}})

    with pytest.raises(PlayerApiError, match="status 401"):
        get_with(handler, NOW_PLAYING_URL)


def test_get_json_invalid_body_raises():
    def handler(request):
        return httpx.Response(200, content=b"<html>busy</html>")

    with pytest.raises(PlayerApiError, match="invalid JSON"):
        get_with(handler, NOW_PLAYING_URL)
