"""FastAPI application factory for podcheck."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from podcheck import __version__
from podcheck.api.deps import init_checker, reset_checker
from podcheck.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from podcheck.api.routers import schema, validate
from podcheck.api.schemas import HealthResponse
from podcheck.service.checker import ManifestChecker
from podcheck.settings import Settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Install the ManifestChecker for the lifetime of the application."""
    init_checker(ManifestChecker())
    try:
        yield
    finally:
        reset_checker()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="podcheck",
        description="Validates Pod manifests and reports every violation with its source line.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(RequestTimingMiddleware)
    app.add_middleware(RequestBodyLimitMiddleware)

    app.include_router(validate.router, prefix="/validate", tags=["validate"])
    app.include_router(schema.router, prefix="/schema", tags=["schema"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("podcheck.api")
    logger.info(
        "podcheck API server v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "podcheck.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
