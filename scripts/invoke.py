#!/usr/bin/env python3
"""
Invoke the Lambda handler locally with an API Gateway event.

Uses the real Secrets Manager and Spotify endpoints, so AWS credentials and
SPOTIFY_SECRET_ID must be available in the environment (or a .env file).

    python scripts/invoke.py /nowplaying
    python scripts/invoke.py /recent
"""

import json
import sys

from spotify_proxy.lambda_function import handler


def main() -> None:
    path = sys.argv[1] if len(sys.argv) > 1 else "/nowplaying"
    event = {"path": path, "httpMethod": "GET", "headers": {}}

    result = handler(event, None)

    print(f"HTTP {result['statusCode']}")
    print(json.dumps(json.loads(result["body"]), indent=2))


if __name__ == "__main__":
    main()
