"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from socialid import __version__
from socialid.api.routes import health_router, records_router
from socialid.client import SocialIdClient
from socialid.config import SocialIdSettings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Handles startup and shutdown of resources.
    """
    settings: SocialIdSettings = app.state.settings

    logger.info("Initializing socialid client...")
    client = SocialIdClient(settings)
    await client.__aenter__()
    app.state.socialid_client = client

    logger.info("Application startup complete")

    yield

    # Cleanup
    logger.info("Shutting down application...")
    await client.close()
    app.state.socialid_client = None

    logger.info("Application shutdown complete")


def create_app(
    settings: SocialIdSettings | None = None,
    *,
    title: str = "Socialid API",
    description: str = "Social record resolution for on-chain identities",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Application settings. If not provided, loaded from environment.
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    settings = settings or SocialIdSettings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=title,
        description=description,
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )
    app.state.settings = settings

    # Configure CORS
    if cors_origins is None:
        cors_origins = ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Register routes
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(records_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
