"""
Weather Routes

Forecast lookup for the presentation layer.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from trailtime.api.v1.deps import get_analysis_service
from trailtime.errors import WeatherUnavailableError
from trailtime.schemas import WeatherSchema
from trailtime.services import AnalysisService

router = APIRouter()


@router.get("", response_model=WeatherSchema)
async def get_forecast(
    lat: float = Query(..., ge=-90, le=90),
    lon: float = Query(..., ge=-180, le=180),
    day: date = Query(..., alias="date"),
    service: AnalysisService = Depends(get_analysis_service),
):
    """Daily forecast for a location and date."""
    try:
        snapshot = await service.weather_client.fetch_forecast(lat, lon, day)
    except WeatherUnavailableError as e:
        raise HTTPException(status_code=503, detail=str(e))

    return WeatherSchema.from_snapshot(snapshot)
