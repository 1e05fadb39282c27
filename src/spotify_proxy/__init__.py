"""Spotify Player Proxy - serverless proxy for Spotify player reads.

Exposes ``.../nowplaying`` and ``.../recent`` by exchanging a stored
refresh token for an access token on every request.

Layers:
    - protocols: Interface contracts (SecretStore, TokenRefresher, PlayerClient)
    - repositories: Secrets Manager and Spotify implementations
    - services: Credentials cache and player orchestration
    - handlers: Routing and response formatting
    - dto: Fixed response bodies
    - entities: Domain models (internal)

Entry points:
    ```python
    from spotify_proxy.lambda_function import handler  # AWS Lambda
    from spotify_proxy.api.app import app              # local FastAPI
    ```
"""

from spotify_proxy.config import get_settings, settings
from spotify_proxy.entities import PlayerContent, PlayerEmpty, ProxyResponse, SpotifyCredentials
from spotify_proxy.errors import SpotifyProxyError
from spotify_proxy.handlers import PlayerHandler
from spotify_proxy.protocols import PlayerClient, SecretStore, TokenRefresher
from spotify_proxy.repositories import (
    SecretsManagerStore,
    SpotifyPlayerClient,
    SpotifyTokenRefresher,
)
from spotify_proxy.services import CredentialsCache, PlayerService

__all__ = [
    # Configuration
    "settings",
    "get_settings",
    # Protocols (interfaces)
    "PlayerClient",
    "SecretStore",
    "TokenRefresher",
    # Services (business logic)
    "CredentialsCache",
    "PlayerService",
    # Handlers
    "PlayerHandler",
    # Repositories
    "SecretsManagerStore",
    "SpotifyPlayerClient",
    "SpotifyTokenRefresher",
    # Entities (domain models)
    "PlayerContent",
    "PlayerEmpty",
    "ProxyResponse",
    "SpotifyCredentials",
    # Errors
    "SpotifyProxyError",
]
