"""Result of a Spotify player read."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PlayerContent:
    """Upstream answered with a JSON body.

    Attributes:
        data: The decoded JSON value, passed through untouched
    """

    data: Any


@dataclass(frozen=True)
class PlayerEmpty:
    """Upstream answered 204 No Content (e.g. nothing is playing)."""


PlayerResult = PlayerContent | PlayerEmpty
