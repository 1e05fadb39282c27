"""Repository layer for external access.

This layer wraps the outbound dependencies (AWS Secrets Manager and the
Spotify accounts and Web APIs) behind protocol-based interfaces.

The repositories are protocol-based (structural typing), not inheritance-based.
Any class implementing the required methods will satisfy the protocol.
"""

from spotify_proxy.protocols import PlayerClient, SecretStore, TokenRefresher

from .secrets_manager_store import SecretsManagerStore
from .spotify_player_client import SpotifyPlayerClient
from .spotify_token_refresher import SpotifyTokenRefresher

__all__ = [
    "PlayerClient",
    "SecretStore",
    "TokenRefresher",
    "SecretsManagerStore",
    "SpotifyPlayerClient",
    "SpotifyTokenRefresher",
]
