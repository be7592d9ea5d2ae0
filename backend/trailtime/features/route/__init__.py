"""
Route geometry: reduction to statistics and display smoothing.

Usage:
    from trailtime.features.route import reduce_track, smooth_track
"""
from .models import TrackPoint, AnalyzedPoint, RouteStats, as_track_points
from .reducer import reduce_track
from .smoother import (
    smooth_track,
    slope_breakdown,
    downsample_stride,
    DISPLAY_TARGET_POINTS,
    SMOOTHING_WINDOWS,
    MAX_SMOOTHING_LEVEL,
)

__all__ = [
    "TrackPoint",
    "AnalyzedPoint",
    "RouteStats",
    "as_track_points",
    "reduce_track",
    "smooth_track",
    "slope_breakdown",
    "downsample_stride",
    "DISPLAY_TARGET_POINTS",
    "SMOOTHING_WINDOWS",
    "MAX_SMOOTHING_LEVEL",
]
