"""
API Router v1

Combines all route modules.
"""

from fastapi import APIRouter

from trailtime.api.v1.routes import analyze, weather

api_router = APIRouter()

api_router.include_router(analyze.router, prefix="/analyze", tags=["Analysis"])
api_router.include_router(weather.router, prefix="/weather", tags=["Weather"])
