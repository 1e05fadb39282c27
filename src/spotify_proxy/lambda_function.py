"""AWS Lambda entry point (API Gateway proxy integration).

Handler setting: ``spotify_proxy.lambda_function.handler``

The event loop, the HTTP client and the credentials cache live for the
life of the Lambda container and are reused across invocations.
"""

import asyncio
import logging
from typing import Any

from spotify_proxy.api.dependencies import build_player_handler, create_http_client
from spotify_proxy.config import configure_logging
from spotify_proxy.entities import ProxyResponse
from spotify_proxy.handlers import PlayerHandler

configure_logging()
logger = logging.getLogger(__name__)

_loop: asyncio.AbstractEventLoop | None = None
_player_handler: PlayerHandler | None = None


def _get_loop() -> asyncio.AbstractEventLoop:
    global _loop
    if _loop is None or _loop.is_closed():
        _loop = asyncio.new_event_loop()
    return _loop


def get_player_handler() -> PlayerHandler:
    """Get or create the container-wide handler."""
    global _player_handler
    if _player_handler is None:
        _player_handler = build_player_handler(create_http_client())
    return _player_handler


def set_player_handler(player_handler: PlayerHandler | None) -> None:
    """Replace the container-wide handler (None resets it)."""
    global _player_handler
    _player_handler = player_handler


def request_line(event: dict[str, Any]) -> tuple[str, str]:
    """Extract ``(method, path)`` from a REST (v1) or HTTP API (v2) event."""
    if "rawPath" in event:
        http = event.get("requestContext", {}).get("http", {})
        return http.get("method", "GET"), event.get("rawPath") or ""
    return event.get("httpMethod") or "GET", event.get("path") or ""


def to_gateway_response(response: ProxyResponse) -> dict[str, Any]:
    """Render a ProxyResponse in the API Gateway proxy format."""
    return {
        "statusCode": response.status_code,
        "headers": response.headers,
        "body": response.render_body(),
    }


def handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    """Lambda handler."""
    method, path = request_line(event or {})
    player_handler = get_player_handler()
    response = _get_loop().run_until_complete(player_handler.handle(path, method))
    return to_gateway_response(response)
