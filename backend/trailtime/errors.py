"""
Domain exceptions.

EmptyTrackError is fatal for a calculation pass. WeatherUnavailableError is
recovered by callers: the pipeline runs without weather.
"""


class TrailTimeError(Exception):
    """Base error."""
    pass


class EmptyTrackError(TrailTimeError):
    """Track has no points; nothing can be computed."""

    def __init__(self, message: str = "Track contains no points"):
        super().__init__(message)


class GPXParseError(TrailTimeError):
    """GPX document could not be parsed."""
    pass


class WeatherUnavailableError(TrailTimeError):
    """Forecast could not be fetched (network error or no data for date)."""
    pass
