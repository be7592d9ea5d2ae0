"""
Shared utilities (NOT business logic).

Usage:
    from trailtime.shared import haversine, moving_average
    from trailtime.shared.formatters import format_duration
"""
from .geo import (
    haversine,
    cumulative_distances,
    grade,
    slope_percent,
    EARTH_RADIUS_KM,
    MIN_SLOPE_DISTANCE_KM,
)
from .elevation import (
    moving_average,
    calculate_elevation_changes,
    ELEVATION_NOISE_FLOOR_M,
)
from .formatters import (
    format_duration,
    format_distance_km,
    format_elevation,
    round_half_up,
)
from .formulas import (
    tobler_hiking_speed,
    tobler_segment_hours,
    naismith_time,
    munter_time,
    din33466_time,
    energy_miles_km,
    petzoldt_time,
    TOBLER_MIN_SPEED_KMH,
)
from .gradients import (
    SLOPE_BANDS,
    STEEP_BANDS,
    classify_slope,
    empty_breakdown,
)

__all__ = [
    # geo
    "haversine",
    "cumulative_distances",
    "grade",
    "slope_percent",
    "EARTH_RADIUS_KM",
    "MIN_SLOPE_DISTANCE_KM",
    # elevation
    "moving_average",
    "calculate_elevation_changes",
    "ELEVATION_NOISE_FLOOR_M",
    # formatters
    "format_duration",
    "format_distance_km",
    "format_elevation",
    "round_half_up",
    # formulas
    "tobler_hiking_speed",
    "tobler_segment_hours",
    "naismith_time",
    "munter_time",
    "din33466_time",
    "energy_miles_km",
    "petzoldt_time",
    "TOBLER_MIN_SPEED_KMH",
    # gradients
    "SLOPE_BANDS",
    "STEEP_BANDS",
    "classify_slope",
    "empty_breakdown",
]
