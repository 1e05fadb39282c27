"""Local HTTP surface for the proxy.

Serves the same handler as the Lambda entry point, for development:

    uvicorn spotify_proxy.api.app:app --reload
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from spotify_proxy.api.dependencies import HandlerDep, lifespan
from spotify_proxy.config import settings

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(
        title="Spotify Player Proxy",
        description="Proxies Spotify now-playing and recently-played endpoints",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.api_route("/{path:path}", methods=ALL_METHODS)
    async def proxy(request: Request, handler: HandlerDep) -> JSONResponse:
        """Route every request through the player handler."""
        result = await handler.handle(request.url.path, request.method)
        return JSONResponse(
            content=result.body,
            status_code=result.status_code,
            headers=result.headers,
        )

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "spotify_proxy.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )
