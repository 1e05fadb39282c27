import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache

import boto3
from dotenv import load_dotenv

load_dotenv()


def _env(name: str, default: str | None = None):
    return field(default_factory=lambda: os.getenv(name, default))


def _optional_float(value: str | None) -> float | None:
    return float(value) if value else None


@dataclass(frozen=True)
class Settings:
    """Application settings loaded from environment variables."""

    # Secrets Manager
    spotify_secret_id: str = _env("SPOTIFY_SECRET_ID", "spotify/portfolio")
    aws_region: str | None = field(
        default_factory=lambda: os.getenv("AWS_REGION", os.getenv("AWS_DEFAULT_REGION"))
    )
    aws_endpoint_url: str | None = _env("AWS_ENDPOINT_URL")

    # Spotify
    spotify_token_url: str = _env("SPOTIFY_TOKEN_URL", "https://accounts.spotify.com/api/token")
    spotify_api_base_url: str = _env("SPOTIFY_API_BASE_URL", "https://api.spotify.com/v1")
    spotify_recent_limit: int = field(
        default_factory=lambda: int(os.getenv("SPOTIFY_RECENT_LIMIT", "8"))
    )
    # None keeps the httpx default timeout
    spotify_http_timeout: float | None = field(
        default_factory=lambda: _optional_float(os.getenv("SPOTIFY_HTTP_TIMEOUT"))
    )

    # Logging
    log_level: str = _env("LOG_LEVEL", "INFO")

    # API
    api_host: str = _env("API_HOST", "0.0.0.0")
    api_port: int = field(default_factory=lambda: int(os.getenv("API_PORT", "8000")))
    api_reload: bool = field(
        default_factory=lambda: os.getenv("API_RELOAD", "true").lower() == "true"
    )

    @property
    def now_playing_url(self) -> str:
        """URL of the currently-playing endpoint."""
        return f"{self.spotify_api_base_url.rstrip('/')}/me/player/currently-playing"

    @property
    def recently_played_url(self) -> str:
        """URL of the recently-played endpoint (limit passed as a query param)."""
        return f"{self.spotify_api_base_url.rstrip('/')}/me/player/recently-played"

    def __post_init__(self) -> None:
        """Validate settings after initialization."""
        if not 1 <= self.spotify_recent_limit <= 50:
            raise ValueError(
                f"SPOTIFY_RECENT_LIMIT must be between 1 and 50, got {self.spotify_recent_limit}"
            )

        if self.spotify_http_timeout is not None and self.spotify_http_timeout <= 0:
            raise ValueError("SPOTIFY_HTTP_TIMEOUT must be positive")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


def get_secrets_manager_client():
    """Create a boto3 Secrets Manager client."""
    return boto3.client(
        "secretsmanager",
        region_name=settings.aws_region,
        endpoint_url=settings.aws_endpoint_url,
    )


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level.

    Installs a stream handler only when the root logger has none, so the
    handler the Lambda runtime attaches is kept as-is.
    """
    level = (level or settings.log_level).upper()
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    root.setLevel(level)
