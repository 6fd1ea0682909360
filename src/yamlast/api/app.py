"""FastAPI application factory for yamlast."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from yamlast import __version__
from yamlast.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from yamlast.api.routers import parse
from yamlast.api.schemas import HealthResponse
from yamlast.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="yamlast",
        description="Parses YAML into position-annotated JSON ASTs with diagnostics.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestBodyLimitMiddleware, max_bytes=settings.max_request_body_bytes)
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(parse.router, prefix="/parse", tags=["parse"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("yamlast.api")
    logger.info(
        "yamlast API Server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "yamlast.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
