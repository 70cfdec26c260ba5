"""
FastAPI application — main entry point.

Serves the admin UI under /admin and a health check at /.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from guide_admin.admin.app import admin_app
from guide_admin.core.api import close_api_client
from guide_admin.core.config import get_backend_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — startup and shutdown."""
    backend = get_backend_config()
    if not backend.get("base_url"):
        logger.warning("backend.base_url not set, using the client default")

    logger.info("Starting Guide Admin...")

    yield

    # Mounted apps get no lifespan events; the shared client is closed here
    logger.info("Shutting down...")
    await close_api_client()


app = FastAPI(
    title="Guide Admin",
    description="Administrative interface for guides, categories and digital content",
    version="0.1.0",
    lifespan=lifespan
)

app.mount("/admin", admin_app)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "guide-admin"}
