"""
Open-Meteo forecast client.

Fetches a single day of daily + hourly forecast data and turns it into a
WeatherSnapshot. Failures surface as WeatherUnavailableError; callers run
the analysis without weather in that case.
"""

import asyncio
import logging
from datetime import date, datetime
from typing import Optional

import httpx

from trailtime.config import settings
from trailtime.errors import WeatherUnavailableError

from .models import WeatherSnapshot

logger = logging.getLogger(__name__)

DAILY_FIELDS = (
    "weathercode",
    "temperature_2m_max",
    "temperature_2m_min",
    "apparent_temperature_max",
    "precipitation_sum",
    "precipitation_probability_max",
    "windspeed_10m_max",
    "windgusts_10m_max",
    "uv_index_max",
    "sunrise",
    "sunset",
)
HOURLY_FIELDS = ("pressure_msl", "cloud_cover", "relative_humidity_2m")

# Used when the hourly series is empty
DEFAULT_PRESSURE_HPA = 1013
DEFAULT_CLOUD_COVER_PCT = 0
DEFAULT_HUMIDITY_PCT = 50


def _mean_or(values: Optional[list], default: float) -> float:
    values = [v for v in (values or []) if v is not None]
    if not values:
        return default
    return round(sum(values) / len(values))


def _parse_time(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    return datetime.fromisoformat(value)


def parse_forecast(data: dict, day: date) -> WeatherSnapshot:
    """
    Build a snapshot from an Open-Meteo response body.

    Raises:
        WeatherUnavailableError: If the payload has no daily data
    """
    daily = data.get("daily") or {}
    if not daily.get("time"):
        raise WeatherUnavailableError(f"No weather data available for {day.isoformat()}")

    hourly = data.get("hourly") or {}

    try:
        return WeatherSnapshot(
            date=day,
            max_temp=daily["temperature_2m_max"][0],
            min_temp=daily["temperature_2m_min"][0],
            feels_like_max=daily["apparent_temperature_max"][0],
            precipitation_mm=daily["precipitation_sum"][0],
            precipitation_probability_pct=daily["precipitation_probability_max"][0],
            wind_speed_kph=daily["windspeed_10m_max"][0],
            wind_gusts_kph=daily["windgusts_10m_max"][0],
            weather_code=int(daily["weathercode"][0]),
            pressure_hpa=_mean_or(hourly.get("pressure_msl"), DEFAULT_PRESSURE_HPA),
            cloud_cover_pct=_mean_or(hourly.get("cloud_cover"), DEFAULT_CLOUD_COVER_PCT),
            humidity_pct=_mean_or(hourly.get("relative_humidity_2m"), DEFAULT_HUMIDITY_PCT),
            uv_index=daily["uv_index_max"][0],
            sunrise=_parse_time(daily["sunrise"][0]),
            sunset=_parse_time(daily["sunset"][0]),
        )
    except (KeyError, IndexError, TypeError, ValueError) as e:
        raise WeatherUnavailableError(f"Malformed weather response: {e}") from e


class OpenMeteoClient:
    """
    Async forecast client.

    Usage:
        async with httpx.AsyncClient() as http:
            client = OpenMeteoClient(http)
            snapshot = await client.fetch_forecast(43.2, 76.9, date(2024, 6, 1))
    """

    def __init__(
        self,
        http: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._http = http
        self.base_url = base_url or settings.weather_api_url
        self.timeout = timeout or settings.weather_timeout_seconds

    async def fetch_forecast(self, lat: float, lon: float, day: date) -> WeatherSnapshot:
        """
        Fetch the forecast for one day.

        Raises:
            WeatherUnavailableError: Network failure, HTTP error or no data
        """
        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": ",".join(DAILY_FIELDS),
            "hourly": ",".join(HOURLY_FIELDS),
            "timezone": "auto",
            "start_date": day.isoformat(),
            "end_date": day.isoformat(),
        }
        logger.debug(f"Fetching forecast for ({lat:.4f}, {lon:.4f}) on {day}")

        try:
            if self._http is not None:
                response = await self._http.get(self.base_url, params=params, timeout=self.timeout)
            else:
                async with httpx.AsyncClient(timeout=self.timeout) as http:
                    response = await http.get(self.base_url, params=params)
            response.raise_for_status()
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Weather API error: {e}")
            raise WeatherUnavailableError(f"Failed to fetch weather data: {e}") from e

        return parse_forecast(data, day)


class LatestForecast:
    """
    Last-request-wins wrapper around a forecast client.

    Starting a new request cancels the one still in flight; the
    superseded caller receives None. AnalysisService holds one per
    instance, so long-lived callers see only their newest lookup.
    """

    def __init__(self, client: OpenMeteoClient):
        self._client = client
        self._task: Optional[asyncio.Task] = None

    async def fetch(self, lat: float, lon: float, day: date) -> Optional[WeatherSnapshot]:
        if self._task is not None and not self._task.done():
            self._task.cancel()

        task = asyncio.ensure_future(self._client.fetch_forecast(lat, lon, day))
        self._task = task

        try:
            return await task
        except asyncio.CancelledError:
            if task.cancelled() and self._task is not task:
                logger.debug(f"Forecast request for {day} superseded")
                return None
            raise
