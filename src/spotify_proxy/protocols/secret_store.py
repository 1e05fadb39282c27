"""Secret store protocol.

Defines the interface for any backend that can return the Spotify
credentials stored under a secret identifier.

Implementations can include:
- AWS Secrets Manager (default)
- Environment variables or a local file for development
"""

from typing import Protocol, runtime_checkable

from spotify_proxy.entities import SpotifyCredentials


@runtime_checkable
class SecretStore(Protocol):
    """Protocol for credential backends."""

    def fetch(self, secret_id: str) -> SpotifyCredentials:
        """Read the credentials stored under ``secret_id``.

        Args:
            secret_id: Name or ARN of the secret

        Returns:
            The decoded credentials

        Raises:
            SecretNotFoundError: If the secret does not exist
            SecretAccessDeniedError: If reading the secret is not allowed
            SecretFormatError: If the secret does not hold the expected keys
        """
        ...
