"""Exception hierarchy for the proxy.

Repositories wrap library errors (botocore, httpx) in these types.
The handler collapses all of them into a single ``server_error`` response.
"""


class SpotifyProxyError(Exception):
    """Base class for proxy failures."""


class SecretStoreError(SpotifyProxyError):
    """Reading credentials from the secret store failed."""


class SecretNotFoundError(SecretStoreError):
    """The secret does not exist."""


class SecretAccessDeniedError(SecretStoreError):
    """The caller is not allowed to read the secret."""


class SecretFormatError(SecretStoreError):
    """The secret exists but does not hold usable credentials."""


class TokenRefreshError(SpotifyProxyError):
    """The refresh-token exchange did not yield an access token."""


class PlayerApiError(SpotifyProxyError):
    """A Spotify player endpoint failed or returned an unusable body."""
