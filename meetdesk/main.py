"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI

from meetdesk.api.errors import register_exception_handlers
from meetdesk.api.health import router as health_router
from meetdesk.api.router import api_router
from meetdesk.config import Settings, settings
from meetdesk.seed import seed_store
from meetdesk.store.memory_store import MemoryStore

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management.

    Startup:
    - Build the in-memory store unless one was injected
    - Seed fixture data if enabled

    Shutdown:
    - Nothing to release; the store's contents are discarded
    """
    config: Settings = app.state.settings
    logger.info(f"Starting {config.app_name}...")

    if getattr(app.state, "store", None) is None:
        store = MemoryStore(goal_offset=config.monthly_goal_offset)
        if config.seed_data:
            await seed_store(store, datetime.now(config.tzinfo))
            logger.info("Store seeded with fixture data")
        app.state.store = store
    logger.info("Store ready")

    yield

    logger.info(f"Shutting down {config.app_name}...")


def create_app(store: MemoryStore | None = None, config: Settings | None = None) -> FastAPI:
    """Build the application around ``store``.

    Args:
        store: Store to serve. When omitted, one is created at startup.
        config: Settings to use instead of the environment's.
    """
    config = config or settings
    application = FastAPI(
        title=config.app_name,
        description="Client meeting scheduling, follow-ups and CRM sync dashboard",
        version=config.app_version,
        lifespan=lifespan,
    )
    application.state.settings = config
    if store is not None:
        application.state.store = store

    register_exception_handlers(application)
    application.include_router(health_router)
    application.include_router(api_router, prefix=config.api_prefix)
    return application


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "meetdesk.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
