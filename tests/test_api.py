"""
Tests for the FastAPI surface of the proxy.
"""

import pytest
from fastapi.testclient import TestClient

from conftest import NOW_PLAYING_URL, FakePlayerClient, FakeSecretStore, FakeTokenRefresher, make_handler
from spotify_proxy.api.app import create_app


@pytest.fixture
def fakes(track):
    return FakeSecretStore(), FakeTokenRefresher(), FakePlayerClient({NOW_PLAYING_URL: track})


@pytest.fixture
def client(fakes):
    """Create a test client with the handler wired to fakes."""
    app = create_app()
    app.state.player_handler = make_handler(*fakes)
    return TestClient(app)


def test_now_playing(client, track):
    response = client.get("/prod/spotify/nowplaying")
    assert response.status_code == 200
    assert response.json() == track.data


def test_recent_empty(client):
    response = client.get("/recent")
    assert response.status_code == 200
    assert response.json() == {"items": []}


def test_not_found(client):
    response = client.get("/")
    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "not_found"}


def test_other_methods_are_not_found(client):
    response = client.post("/nowplaying")
    assert response.status_code == 404
    assert response.json() == {"ok": False, "error": "not_found"}


def test_every_response_is_json_with_open_cors(client):
    for path in ("/nowplaying", "/recent", "/missing"):
        response = client.get(path)
        assert response.headers["content-type"] == "application/json"
        assert response.headers["access-control-allow-origin"] == "*"


def test_server_error():
    app = create_app()
    app.state.player_handler = make_handler(
        FakeSecretStore(error=RuntimeError("boom")),
        FakeTokenRefresher(),
        FakePlayerClient(),
    )
    client = TestClient(app)

    response = client.get("/nowplaying")
    assert response.status_code == 500
    assert response.json() == {"ok": False, "error": "server_error"}
    assert response.headers["access-control-allow-origin"] == "*"


def test_handler_missing_raises():
    client = TestClient(create_app(), raise_server_exceptions=True)

    with pytest.raises(RuntimeError, match="PlayerHandler not initialized"):
        client.get("/nowplaying")
