"""Data Transfer Objects for API contracts.

These Pydantic models define the fixed bodies the proxy produces itself.
Upstream payloads are passed through as plain JSON and never modelled.
"""

from .responses import (
    ErrorResponse,
    NowPlayingData,
    NowPlayingEmptyResponse,
    RecentEmptyResponse,
)

__all__ = [
    "ErrorResponse",
    "NowPlayingData",
    "NowPlayingEmptyResponse",
    "RecentEmptyResponse",
]
