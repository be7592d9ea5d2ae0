"""
Analysis Service

Wraps the pure pipeline with the weather lookup. Weather failures are
turned into warnings; the analysis always completes without weather.
"""

import logging
from datetime import date, datetime
from typing import List, Optional, Sequence, Tuple

from trailtime.errors import EmptyTrackError, WeatherUnavailableError
from trailtime.features.hiking import HikerProfile
from trailtime.features.route import TrackPoint
from trailtime.features.weather import LatestForecast, OpenMeteoClient, WeatherSnapshot

from .pipeline import AnalysisResult, compute

logger = logging.getLogger(__name__)

WEATHER_SUPERSEDED_WARNING = "Weather request superseded by a newer one"


class AnalysisService:
    """
    Service for route analysis with optional forecast lookup.

    Usage:
        service = AnalysisService()
        result, warnings = await service.analyze(points, profile, fetch_weather=True)
    """

    def __init__(self, weather_client: Optional[OpenMeteoClient] = None):
        self.weather_client = weather_client or OpenMeteoClient()
        # A long-lived instance (CLI session, UI shell) keeps only the
        # newest lookup; older in-flight ones are cancelled
        self._forecasts = LatestForecast(self.weather_client)

    async def get_weather(
        self,
        points: Sequence[TrackPoint],
        day: date,
    ) -> Tuple[Optional[WeatherSnapshot], List[str]]:
        """
        Forecast at the first track point.

        Failures become warnings. A lookup superseded by a newer call on
        the same service returns no snapshot.
        """
        start = points[0]
        try:
            snapshot = await self._forecasts.fetch(start.lat, start.lon, day)
        except WeatherUnavailableError as e:
            logger.warning(f"Continuing without weather: {e}")
            return None, [f"Weather unavailable: {e}"]
        if snapshot is None:
            return None, [WEATHER_SUPERSEDED_WARNING]
        return snapshot, []

    async def analyze(
        self,
        points: Sequence[TrackPoint],
        profile: HikerProfile,
        smoothing_level: int = 0,
        start_time: Optional[datetime] = None,
        weather: Optional[WeatherSnapshot] = None,
        fetch_weather: bool = False,
        weather_date: Optional[date] = None,
    ) -> Tuple[AnalysisResult, List[str]]:
        """
        Analyze a route.

        Raises:
            EmptyTrackError: If there are no points
            ValueError: If the smoothing level is out of range
        """
        if not points:
            raise EmptyTrackError()

        warnings: List[str] = []
        if weather is None and fetch_weather:
            day = weather_date or (start_time.date() if start_time else date.today())
            weather, warnings = await self.get_weather(points, day)

        result = compute(
            points,
            profile,
            smoothing_level=smoothing_level,
            weather=weather,
            start_time=start_time,
        )
        if result.safety and result.safety.is_night_hiking:
            warnings.append("Estimated finish is after sunset")

        return result, warnings
