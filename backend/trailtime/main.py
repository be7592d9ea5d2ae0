"""
TrailTime API

FastAPI application for GPX route analysis and hiking time estimation.
"""

from contextlib import asynccontextmanager
import logging
import sys

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trailtime import __version__
from trailtime.config import settings
from trailtime.api.v1.router import api_router


logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Share one HTTP connection pool for forecast lookups."""
    app.state.http = httpx.AsyncClient(timeout=settings.weather_timeout_seconds)
    logger.info(f"TrailTime API {__version__} started (weather: {settings.weather_api_url})")

    yield

    await app.state.http.aclose()
    logger.info("Shutting down...")


app = FastAPI(
    title="TrailTime API",
    description="GPX route statistics, hiking time estimates and difficulty rating",
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    return {"status": "healthy", "version": __version__}
