"""
Weather collaborator.

Available components:
- OpenMeteoClient: async forecast fetch (httpx)
- LatestForecast: last-request-wins wrapper
- WeatherSnapshot: one day of forecast
"""
from .models import WeatherSnapshot
from .codes import describe_weather_code
from .client import OpenMeteoClient, LatestForecast, parse_forecast

__all__ = [
    "WeatherSnapshot",
    "describe_weather_code",
    "OpenMeteoClient",
    "LatestForecast",
    "parse_forecast",
]
