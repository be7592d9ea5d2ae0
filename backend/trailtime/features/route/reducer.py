"""
Track reduction.

Turns an ordered point list into RouteStats: distance, elevation
gain/loss with a noise floor, min/max elevation, per-segment slope and a
slope-distance histogram.
"""

import logging
from typing import Sequence

from trailtime.errors import EmptyTrackError
from trailtime.shared.elevation import calculate_elevation_changes
from trailtime.shared.geo import haversine, slope_percent
from trailtime.shared.gradients import classify_slope, empty_breakdown

from .models import AnalyzedPoint, RouteStats, TrackPoint

logger = logging.getLogger(__name__)


def reduce_track(points: Sequence[TrackPoint]) -> RouteStats:
    """
    Reduce a track to route statistics.

    Args:
        points: Ordered track points (at least one)

    Returns:
        RouteStats at full precision, owning the analyzed point sequence

    Raises:
        EmptyTrackError: If the track has no points
    """
    if not points:
        raise EmptyTrackError()

    total_distance = 0.0
    max_elevation = points[0].ele
    min_elevation = points[0].ele
    abs_slope_sum = 0.0
    slope_count = 0
    breakdown = empty_breakdown()

    analyzed = [
        AnalyzedPoint(
            lat=points[0].lat,
            lon=points[0].lon,
            ele=points[0].ele,
            dist_from_start=0.0,
        )
    ]

    for i in range(1, len(points)):
        prev = points[i - 1]
        curr = points[i]

        segment_km = haversine(prev.lat, prev.lon, curr.lat, curr.lon)
        total_distance += segment_km

        ele_diff = curr.ele - prev.ele

        max_elevation = max(max_elevation, curr.ele)
        min_elevation = min(min_elevation, curr.ele)

        slope = slope_percent(segment_km, ele_diff)
        if slope is not None:
            abs_slope_sum += abs(slope)
            slope_count += 1
        breakdown[classify_slope(slope)] += segment_km

        analyzed.append(
            AnalyzedPoint(
                lat=curr.lat,
                lon=curr.lon,
                ele=curr.ele,
                dist_from_start=total_distance,
                slope=slope if slope is not None else 0.0,
            )
        )

    elevation_gain, elevation_loss = calculate_elevation_changes([p.ele for p in points])
    avg_slope = abs_slope_sum / slope_count if slope_count else 0.0

    logger.debug(
        f"Reduced {len(points)} points: {total_distance:.3f} km, "
        f"+{elevation_gain:.1f}/-{elevation_loss:.1f} m"
    )

    return RouteStats(
        total_distance=total_distance,
        elevation_gain=elevation_gain,
        elevation_loss=elevation_loss,
        max_elevation=max_elevation,
        min_elevation=min_elevation,
        avg_slope=avg_slope,
        slope_breakdown=breakdown,
        points=tuple(analyzed),
    )
