"""Spotify credentials domain entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SpotifyCredentials:
    """Long-lived Spotify app credentials.

    Attributes:
        client_id: Spotify application client id
        client_secret: Spotify application client secret
        refresh_token: Refresh token granted to the application
    """

    client_id: str
    client_secret: str = field(repr=False)
    refresh_token: str = field(repr=False)
