"""
Analysis Pipeline

Single entry point that turns a track and a hiker profile into every
derived result. Pure and synchronous: the same inputs always give the
same AnalysisResult. Weather is optional and fetched by the caller.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional, Sequence, Tuple

from trailtime.features.route import (
    AnalyzedPoint,
    RouteStats,
    TrackPoint,
    as_track_points,
    reduce_track,
    smooth_track,
    slope_breakdown,
)
from trailtime.features.hiking import (
    HikerProfile,
    SmartAggregate,
    TimeEstimation,
    aggregate_estimates,
    estimate_all,
)
from trailtime.features.metrics import (
    BioMetrics,
    DifficultyRating,
    SafetyMetrics,
    compute_bio_metrics,
    compute_safety,
    rate_difficulty,
)
from trailtime.features.weather import WeatherSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the presentation layer needs for one calculation pass."""
    stats: RouteStats
    smoothing_level: int
    smoothed_points: Tuple[AnalyzedPoint, ...]
    smoothed_breakdown: Dict[str, float]
    estimations: List[TimeEstimation]
    smart: SmartAggregate
    difficulty: DifficultyRating
    bio: BioMetrics
    safety: Optional[SafetyMetrics]
    weather: Optional[WeatherSnapshot]


def compute(
    track: Sequence[TrackPoint],
    profile: HikerProfile,
    smoothing_level: int = 0,
    weather: Optional[WeatherSnapshot] = None,
    start_time: Optional[datetime] = None,
) -> AnalysisResult:
    """
    Run the full analysis.

    Args:
        track: Ordered TrackPoints or (lat, lon, ele) tuples
        profile: Hiker profile
        smoothing_level: 0..4, only affects the display series
        weather: Forecast for the hike date, if available
        start_time: Planned start; safety metrics are omitted without it

    Returns:
        AnalysisResult

    Raises:
        EmptyTrackError: If the track has no points
        ValueError: If the smoothing level is out of range
    """
    stats = reduce_track(as_track_points(track))

    smoothed = smooth_track(stats.points, smoothing_level)
    smoothed_breakdown = slope_breakdown(smoothed)

    estimations = estimate_all(stats, profile)
    smart = aggregate_estimates(estimations)
    logger.debug(
        "Estimates: " + ", ".join(f"{e.method}={e.time_minutes}" for e in estimations)
    )

    difficulty = rate_difficulty(stats)
    bio = compute_bio_metrics(
        stats,
        profile,
        smart.value,
        max_temp=weather.max_temp if weather else None,
    )

    safety = None
    if start_time is not None:
        safety = compute_safety(
            start_time,
            smart.value,
            sunset=weather.sunset if weather else None,
        )

    logger.info(
        f"Analyzed {len(stats.points)} points: {stats.total_distance:.2f} km, "
        f"+{stats.elevation_gain:.0f} m, {smart.method.value}={smart.value:.0f} min"
    )

    return AnalysisResult(
        stats=stats,
        smoothing_level=smoothing_level,
        smoothed_points=smoothed,
        smoothed_breakdown=smoothed_breakdown,
        estimations=estimations,
        smart=smart,
        difficulty=difficulty,
        bio=bio,
        safety=safety,
        weather=weather,
    )
