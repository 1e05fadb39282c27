"""Proxy response domain entity."""

import json
from dataclasses import dataclass
from typing import Any

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}


@dataclass(frozen=True)
class ProxyResponse:
    """Status code and JSON body produced by the request handler.

    Attributes:
        status_code: HTTP status to send
        body: JSON-serializable body
    """

    status_code: int
    body: Any

    @property
    def headers(self) -> dict[str, str]:
        """Headers sent with every response."""
        return dict(RESPONSE_HEADERS)

    def render_body(self) -> str:
        """Serialize the body to a JSON string."""
        return json.dumps(self.body)
