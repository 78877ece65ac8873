"""
FastAPI Application Factory.

This module builds the helloworld application instance. It is responsible for:
1.  **Exception Handling**: Global handlers so unexpected errors return structured JSON.
2.  **Routing**: The root greeting route and a liveness probe.
3.  **Lifecycle**: Logging startup/shutdown events.

Design Pattern
--------------
We use an **Application Factory** pattern (`create_app`). This allows for:
-   Easy testing (spinning up separate app instances per test).
-   Configuration injection (passing distinct settings for Dev/Prod).
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from helloworld import __version__
from helloworld.core.settings import Settings, get_logger, load_settings

GREETING = "Hello World!"

logger = get_logger("helloworld.api")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """ASGI lifespan: log startup and shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting up (environment=%s)", settings.environment)
    yield
    logger.info("Shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Construct and configure the helloworld FastAPI application.

    Parameters
    ----------
    settings:
        Optional settings override; defaults to the cached `load_settings()`.

    Returns
    -------
    FastAPI
        The configured ASGI application ready to be served by Uvicorn.
    """
    settings = settings if settings is not None else load_settings()

    app = FastAPI(
        title="helloworld",
        description="Minimal greeting service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # -----------------------------------------------------------------------
    # Global Exception Handlers
    # -----------------------------------------------------------------------
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all handler so unhandled exceptions return structured JSON."""
        logger.exception("Unhandled error on %s", request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": "Internal Server Error",
                "detail": str(exc),
                "path": request.url.path,
            },
        )

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError) -> JSONResponse:
        """Map Python ValueErrors to HTTP 400 Bad Request."""
        return JSONResponse(
            status_code=400,
            content={
                "error": "Bad Request",
                "detail": str(exc),
            },
        )

    # -----------------------------------------------------------------------
    # Routes
    # -----------------------------------------------------------------------
    @app.get("/", response_class=PlainTextResponse, tags=["Greeting"])
    async def root() -> str:
        """Return the plain-text greeting."""
        logger.debug("GET / -> %r", GREETING)
        return GREETING

    @app.get("/health", tags=["System"])
    async def health_check() -> dict[str, str]:
        """Simple liveness probe."""
        return {
            "status": "ok",
            "environment": settings.environment,
            "version": __version__,
        }

    return app


__all__ = ["GREETING", "create_app"]
