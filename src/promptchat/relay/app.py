"""Relay FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..endpoint import InferenceEndpoint, create_endpoint
from ..logs import setup_logging
from .routes import router
from .settings import RelaySettings

logger = logging.getLogger(__name__)


def create_application(
    settings: RelaySettings | None = None,
    upstream: InferenceEndpoint | None = None,
) -> FastAPI:
    """Create and configure the relay application.

    Args:
        settings: Relay settings (default: read from the environment)
        upstream: Endpoint to forward to (default: a direct endpoint built
            from ``settings``); it is closed on shutdown either way
    """
    settings = settings or RelaySettings.from_env()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.upstream = upstream or create_endpoint(
            "direct",
            base_url=settings.upstream_url,
            timeout=settings.timeout,
        )
        logger.info(
            "Relay started (upstream=%s, mode=%s)",
            app.state.upstream.url,
            settings.mode.value,
        )
        yield
        await app.state.upstream.close()
        logger.info("Relay stopped")

    app = FastAPI(
        title="promptchat relay",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.include_router(router)
    return app


def create_app_from_env() -> FastAPI:
    """Uvicorn factory: ``uvicorn promptchat.relay.app:create_app_from_env --factory``."""
    settings = RelaySettings.from_env()
    setup_logging(settings.log_level)
    return create_application(settings)
