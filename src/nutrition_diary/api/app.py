"""FastAPI application factory."""

import logging
from collections import OrderedDict
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from nutrition_diary.api.diary import router as diary_router
from nutrition_diary.app_logging import configure_logging
from nutrition_diary.containers import AppContainer
from nutrition_diary.services.nutrition_store import NutritionStore


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Diary API started (environment=%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    stores: OrderedDict[str, NutritionStore] = OrderedDict()
    app.state.stores = stores

    app.include_router(diary_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
