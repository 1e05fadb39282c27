"""Handler layer for inbound requests.

Handlers depend on services (business logic), not directly on repositories.
Both the FastAPI app and the Lambda entry point delegate to the same handler.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Secrets Manager / Spotify)
"""

from .player_handler import PlayerHandler

__all__ = [
    "PlayerHandler",
]
