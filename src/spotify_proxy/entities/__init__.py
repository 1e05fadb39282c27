"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services,
repositories and handlers. Response bodies sent to callers are built
from DTOs in the dto package.
"""

from .credentials import SpotifyCredentials
from .player_result import PlayerContent, PlayerEmpty, PlayerResult
from .proxy_response import ProxyResponse

__all__ = [
    "SpotifyCredentials",
    "PlayerContent",
    "PlayerEmpty",
    "PlayerResult",
    "ProxyResponse",
]
