"""Shared route dependencies."""

from fastapi import Request

from trailtime.features.weather import OpenMeteoClient
from trailtime.services import AnalysisService


def get_analysis_service(request: Request) -> AnalysisService:
    """Analysis service bound to the app's HTTP pool when the lifespan has run."""
    http = getattr(request.app.state, "http", None)
    return AnalysisService(weather_client=OpenMeteoClient(http=http))
