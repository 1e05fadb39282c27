"""Response DTOs for API endpoints."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Response DTO for routing misses and failures."""

    ok: Literal[False] = False
    error: str = Field(..., description="Error code: 'not_found' or 'server_error'")

    @classmethod
    def not_found(cls) -> "ErrorResponse":
        return cls(error="not_found")

    @classmethod
    def server_error(cls) -> "ErrorResponse":
        return cls(error="server_error")


class NowPlayingData(BaseModel):
    """Inner ``data`` object of the empty now-playing body."""

    item: Any | None = Field(None, description="Always null when nothing is playing")


class NowPlayingEmptyResponse(BaseModel):
    """Response DTO returned when nothing is currently playing."""

    ok: Literal[True] = True
    data: NowPlayingData = Field(default_factory=NowPlayingData)


class RecentEmptyResponse(BaseModel):
    """Response DTO returned when there is no listening history."""

    items: list[Any] = Field(default_factory=list)
