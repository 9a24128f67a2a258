"""Feedback Management System"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from feedback_api.api.common.exception_handlers import register_exception_handlers
from feedback_api.api.common_app import app_common
from feedback_api.config import settings
from feedback_api.db.config import dispose_engine
from feedback_api.logging import configure_logging

# Configure the process-wide logger once, before the app starts handling requests
configure_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Announce startup and release database connections on shutdown."""
    logger.info(f"{settings.APP_NAME} is running ({settings.DTAP}-{settings.IMAGE_TAG})")
    logger.info(f"Health check: {settings.BACKEND_BASE_URL}/api/health")
    yield
    await dispose_engine()
    logger.info(f"{settings.APP_NAME} stopped")


# Create FastAPI application instance
app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================
# Register exception handlers for consistent error responses
register_exception_handlers(app)

# ============================================================================
# MOUNT SUB-APPLICATIONS
# ============================================================================
app.mount("/api", app_common)


@app.get("/")
async def root():
    return "OK"


def run() -> None:
    """Start the API server."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)
