"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
making them testable and flexible.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Secrets Manager / Spotify)

Usage:
    ```python
    from spotify_proxy.services import CredentialsCache, PlayerService

    service = PlayerService.create(
        credentials=CredentialsCache(store=SecretsManagerStore.create()),
        token_refresher=refresher,
        player_client=player,
    )
    ```
"""

from .credentials_cache import CredentialsCache
from .player_service import PlayerService

__all__ = [
    "CredentialsCache",
    "PlayerService",
]
