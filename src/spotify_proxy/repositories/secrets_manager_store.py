"""AWS Secrets Manager implementation of SecretStore.

The secret is expected to hold a JSON object::

    {"client_id": "...", "client_secret": "...", "refresh_token": "..."}
"""

import json
import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from spotify_proxy.config import get_secrets_manager_client
from spotify_proxy.entities import SpotifyCredentials
from spotify_proxy.errors import (
    SecretAccessDeniedError,
    SecretFormatError,
    SecretNotFoundError,
    SecretStoreError,
)

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("client_id", "client_secret", "refresh_token")


class SecretsManagerStore:
    """Secrets Manager implementation of the SecretStore protocol.

    This class satisfies the SecretStore protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        store = SecretsManagerStore.create()
        credentials = store.fetch("spotify/portfolio")
        ```
    """

    def __init__(self, client: Any | None = None) -> None:
        """Initialize the store.

        Args:
            client: A boto3 ``secretsmanager`` client. If None, creates one lazily.
        """
        self._client = client

    @property
    def client(self) -> Any:
        """Lazy-load the boto3 client."""
        if self._client is None:
            self._client = get_secrets_manager_client()
        return self._client

    @classmethod
    def create(cls, client: Any | None = None) -> "SecretsManagerStore":
        """Factory method to create SecretsManagerStore with defaults."""
        return cls(client=client)

    def fetch(self, secret_id: str) -> SpotifyCredentials:
        """Read and decode the credentials stored under ``secret_id``.

        Args:
            secret_id: Name or ARN of the secret

        Returns:
            The decoded credentials

        Raises:
            SecretNotFoundError: If the secret does not exist
            SecretAccessDeniedError: If the caller may not read it
            SecretFormatError: If the secret string is missing or malformed
            SecretStoreError: For any other Secrets Manager failure
        """
        try:
            response = self.client.get_secret_value(SecretId=secret_id)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code", "")
            if code == "ResourceNotFoundException":
                raise SecretNotFoundError(f"Secret not found: {secret_id}") from e
            if code == "AccessDeniedException":
                raise SecretAccessDeniedError(f"Access denied to secret: {secret_id}") from e
            raise SecretStoreError(f"Secrets Manager error ({code}): {secret_id}") from e
        except BotoCoreError as e:
            raise SecretStoreError(f"Secrets Manager unreachable: {e}") from e

        secret_string = response.get("SecretString")
        if not secret_string:
            raise SecretFormatError(f"Secret has no string value: {secret_id}")

        return self._parse(secret_id, secret_string)

    @staticmethod
    def _parse(secret_id: str, secret_string: str) -> SpotifyCredentials:
        try:
            data = json.loads(secret_string)
        except json.JSONDecodeError as e:
            raise SecretFormatError(f"Secret is not valid JSON: {secret_id}") from e

        if not isinstance(data, dict):
            raise SecretFormatError(f"Secret is not a JSON object: {secret_id}")

        missing = [key for key in REQUIRED_KEYS if not data.get(key)]
        if missing:
            raise SecretFormatError(f"Secret {secret_id} is missing keys: {', '.join(missing)}")

        return SpotifyCredentials(
            client_id=data["client_id"],
            client_secret=data["client_secret"],
            refresh_token=data["refresh_token"],
        )
