"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request

from logaline.api.routes import drafts
from logaline.core.config import settings
from logaline.core.logging import setup_logging, get_logger
from logaline.db.connection import DraftStore
from logaline.services.drafts import DraftSession

# Set up logging
setup_logging()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager for startup/shutdown."""
    # Startup
    logger.info("application_starting", app_name=settings.app_name)

    # Open the draft store; on failure drafts stay in memory for this run
    store = DraftStore()
    if await store.open() is None:
        logger.warning("drafts_not_persisted", reason=str(store.init_error))

    app.state.store = store
    app.state.session = DraftSession(store)

    logger.info("application_started")

    yield

    # Shutdown
    logger.info("application_stopping")
    await store.close()
    logger.info("application_stopped")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    description="Annotate transcripts as plain text with drafts cached per recording",
    version="0.1.0",
    lifespan=lifespan,
)

# Include routers
app.include_router(drafts.router)


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | bool]:
    """Health check endpoint."""
    return {"status": "healthy", "persistent": request.app.state.store.is_ready}


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "message": "Log A Line API",
        "docs": "/docs",
    }
