"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from whisper_diary import __version__
from whisper_diary.api.config import APIConfig, DEFAULT_API_CONFIG
from whisper_diary.api.health import router as health_router
from whisper_diary.api.middleware import setup_middleware
from whisper_diary.pipeline import TranscriptMerger

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info("Starting Whisper Diary API...")
    app.state.initialized = True
    
    yield
    
    logger.info("Whisper Diary API shutdown complete")


def create_app(
    config: APIConfig | None = None,
    merger: TranscriptMerger | None = None,
) -> FastAPI:
    """Create and configure FastAPI application."""
    config = config or DEFAULT_API_CONFIG
    
    app = FastAPI(
        title="Whisper Diary API",
        description="Merge Whisper transcripts with Premiere speaker markers",
        version=__version__,
        docs_url="/docs" if config.enable_docs else None,
        redoc_url="/redoc" if config.enable_docs else None,
        openapi_url="/openapi.json" if config.enable_docs else None,
        lifespan=lifespan,
    )
    
    app.state.config = config
    app.state.merger = merger or TranscriptMerger()
    app.state.initialized = False
    
    if config.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    
    setup_middleware(app)
    
    app.include_router(health_router, prefix="/health", tags=["health"])
    
    from whisper_diary.api.v1.router import router as v1_router
    app.include_router(v1_router, prefix="/api/v1")
    
    return app
