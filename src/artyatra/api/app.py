"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from artyatra.api.artstyles import router as artstyles_router
from artyatra.api.auth import router as auth_router
from artyatra.api.errors import register_error_handlers
from artyatra.api.search import router as search_router
from artyatra.api.swecha import router as swecha_router
from artyatra.api.ui import router as ui_router
from artyatra.app_logging import configure_logging
from artyatra.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "ArtYatra starting",
            extra={"environment": container.settings.environment},
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="ArtYatra", lifespan=lifespan)
    app.state.container = container
    register_error_handlers(app)

    app.include_router(artstyles_router)
    app.include_router(auth_router)
    app.include_router(search_router)
    app.include_router(swecha_router)
    app.include_router(ui_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
