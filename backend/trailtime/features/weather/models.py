"""Weather snapshot for one day at one location."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from .codes import describe_weather_code


@dataclass(frozen=True)
class WeatherSnapshot:
    """
    Daily forecast.

    Only max_temp and sunset feed the metrics; the rest is for display.
    """
    date: date
    max_temp: float              # °C
    min_temp: float              # °C
    feels_like_max: float        # °C
    precipitation_mm: float
    precipitation_probability_pct: float
    wind_speed_kph: float
    wind_gusts_kph: float
    weather_code: int
    pressure_hpa: float
    cloud_cover_pct: float
    humidity_pct: float
    uv_index: float
    sunrise: Optional[datetime] = None
    sunset: Optional[datetime] = None

    @property
    def description(self) -> str:
        return describe_weather_code(self.weather_code)
