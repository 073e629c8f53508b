"""
FastAPI application for the Content Review Hub.
"""

from __future__ import annotations

import importlib.metadata
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .db.base import init_database
from .logging_config import configure_logging
from .review.routes import router as content_review_router

logger = structlog.get_logger()

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    configure_logging(settings)
    logger.info("starting", app=settings.app_name, environment=settings.environment)

    try:
        init_database()
    except Exception as e:
        logger.error("startup_failed", error=str(e))
        raise

    yield

    logger.info("shutdown_complete")


app = FastAPI(
    title="Content Review Hub",
    description="Multi-lens review workflow for creative assets",
    version=importlib.metadata.version("content-review-hub"),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(content_review_router)


@app.get("/health", tags=["system"])
async def health() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/healthz")
def healthz() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/version")
def version() -> dict[str, str]:
    """Return the version of the application."""
    return {"version": importlib.metadata.version("content-review-hub")}
