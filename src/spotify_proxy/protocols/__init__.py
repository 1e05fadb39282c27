"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Swapping the secret backend or HTTP client without touching services
- Unit testing with in-memory fakes
- Clear separation of concerns

Usage:
    ```python
    from spotify_proxy.protocols import SecretStore

    store: SecretStore = SecretsManagerStore.create()  # works
    store: SecretStore = FakeSecretStore(...)          # also works
    ```
"""

from .player_client import PlayerClient
from .secret_store import SecretStore
from .token_refresher import TokenRefresher

__all__ = [
    "PlayerClient",
    "SecretStore",
    "TokenRefresher",
]
