"""
Display/analysis smoothing.

Downsamples a track to a bounded size, recomputes slope on the reduced
series and optionally applies a centered moving average to elevation and
slope.
"""

import logging
import math
from typing import Dict, Sequence, Tuple

from trailtime.errors import EmptyTrackError
from trailtime.shared.elevation import moving_average
from trailtime.shared.geo import cumulative_distances, slope_percent, MIN_SLOPE_DISTANCE_KM
from trailtime.shared.gradients import classify_slope, empty_breakdown

from .models import AnalyzedPoint, TrackPoint

logger = logging.getLogger(__name__)

# Upper bound on the downsampled series length
DISPLAY_TARGET_POINTS = 1000

# Smoothing level -> moving-average window (samples); level 0 = raw
SMOOTHING_WINDOWS: Dict[int, int] = {
    0: 1,
    1: 5,
    2: 15,
    3: 40,
    4: 80,
}
MAX_SMOOTHING_LEVEL = max(SMOOTHING_WINDOWS)


def downsample_stride(count: int, target: int = DISPLAY_TARGET_POINTS) -> int:
    """Stride that keeps at most `target` points."""
    return max(1, math.ceil(count / target))


def smooth_track(
    points: Sequence[TrackPoint],
    level: int = 0,
    target: int = DISPLAY_TARGET_POINTS,
) -> Tuple[AnalyzedPoint, ...]:
    """
    Downsample and smooth a track.

    Args:
        points: Raw or analyzed points; existing slope values are ignored
        level: Smoothing level 0 (none) .. 4 (maximum)
        target: Maximum number of output points

    Returns:
        New analyzed point sequence. Distances come from the downsampling
        pass; elevation and slope are smoothed when level > 0.

    Raises:
        EmptyTrackError: If there are no points
        ValueError: If the smoothing level is out of range
    """
    if level not in SMOOTHING_WINDOWS:
        raise ValueError(
            f"Smoothing level must be 0..{MAX_SMOOTHING_LEVEL}, got {level}"
        )
    if not points:
        raise EmptyTrackError()

    # Distances come from the full-resolution track
    distances = cumulative_distances(points)

    stride = downsample_stride(len(points), target)
    indices = range(0, len(points), stride)

    kept = [points[i] for i in indices]
    kept_distances = [distances[i] for i in indices]
    elevations = [p.ele for p in kept]

    slopes = [0.0]
    for i in range(1, len(kept)):
        slope = slope_percent(
            kept_distances[i] - kept_distances[i - 1],
            elevations[i] - elevations[i - 1],
        )
        slopes.append(slope if slope is not None else 0.0)

    window = SMOOTHING_WINDOWS[level]
    if window > 1:
        elevations = moving_average(elevations, window)
        slopes = moving_average(slopes, window)

    logger.debug(
        f"Smoothed {len(points)} -> {len(kept)} points "
        f"(stride={stride}, level={level}, window={window})"
    )

    return tuple(
        AnalyzedPoint(
            lat=p.lat,
            lon=p.lon,
            ele=ele,
            dist_from_start=dist,
            slope=slope,
        )
        for p, ele, dist, slope in zip(kept, elevations, kept_distances, slopes)
    )


def slope_breakdown(points: Sequence[AnalyzedPoint]) -> Dict[str, float]:
    """
    Distance per slope band over an analyzed series.

    Each segment takes the slope stored on its end point and the
    distance between consecutive dist_from_start values.
    """
    breakdown = empty_breakdown()
    for i in range(1, len(points)):
        segment_km = points[i].dist_from_start - points[i - 1].dist_from_start
        slope = points[i].slope if segment_km > MIN_SLOPE_DISTANCE_KM else None
        breakdown[classify_slope(slope)] += segment_km
    return breakdown
