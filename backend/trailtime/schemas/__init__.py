"""Pydantic I/O models."""
from .analysis import (
    PointIn,
    ProfileIn,
    WeatherSchema,
    AnalyzeRequest,
    AnalysisResponse,
)

__all__ = [
    "PointIn",
    "ProfileIn",
    "WeatherSchema",
    "AnalyzeRequest",
    "AnalysisResponse",
]
