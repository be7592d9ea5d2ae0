"""
Difficulty rating.

Score = effort points (flat km + gain / 100), mapped onto 8 bands, plus
terrain tags derived from the elevation profile and slope breakdown.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence

from trailtime.shared.elevation import ELEVATION_NOISE_FLOOR_M
from trailtime.shared.gradients import STEEP_BANDS
from trailtime.features.route.models import AnalyzedPoint, RouteStats


class DifficultyLevel(str, Enum):
    VERY_EASY = "very_easy"
    EASY = "easy"
    MODERATE = "moderate"
    CHALLENGING = "challenging"
    HARD = "hard"
    DEMANDING = "demanding"
    STRENUOUS = "strenuous"
    EXTREME = "extreme"


@dataclass(frozen=True)
class DifficultyBand:
    level: DifficultyLevel
    upper_bound: float  # exclusive, effort points
    label: str
    description: str
    color: str


# Ascending; the last band is open-ended
DIFFICULTY_BANDS = (
    DifficultyBand(DifficultyLevel.VERY_EASY, 5, "Very Easy",
                   "Short walk on gentle terrain, suitable for everyone.", "#10b981"),
    DifficultyBand(DifficultyLevel.EASY, 8, "Easy",
                   "Comfortable outing with little climbing.", "#22c55e"),
    DifficultyBand(DifficultyLevel.MODERATE, 12, "Moderate",
                   "Half-day hike; some fitness required.", "#84cc16"),
    DifficultyBand(DifficultyLevel.CHALLENGING, 18, "Challenging",
                   "Long or hilly; regular hikers will feel it.", "#eab308"),
    DifficultyBand(DifficultyLevel.HARD, 25, "Hard",
                   "Full day with significant climbing.", "#f97316"),
    DifficultyBand(DifficultyLevel.DEMANDING, 35, "Demanding",
                   "Long mountain day; good fitness and planning needed.", "#ef4444"),
    DifficultyBand(DifficultyLevel.STRENUOUS, 45, "Strenuous",
                   "Very long and steep; for experienced hikers only.", "#dc2626"),
    DifficultyBand(DifficultyLevel.EXTREME, float("inf"), "Extreme",
                   "Expedition-grade effort.", "#7f1d1d"),
)

# Terrain tag thresholds
HIGH_ALTITUDE_M = 2500
ALPINE_M = 1500
EDGE_FRACTION = 0.15            # first/last 15% of points
STEEP_START_GAIN_SHARE = 0.25
UPHILL_FINISH_GAIN_M = 150
STEEP_DISTANCE_SHARE = 0.30
FLAT_DISTANCE_SHARE = 0.60
MAX_TERRAIN_TAGS = 2
DEFAULT_TERRAIN_TAG = "Varied Terrain"


@dataclass(frozen=True)
class DifficultyRating:
    score: float
    level: DifficultyLevel
    label: str
    description: str
    color: str
    terrain_tags: str
    equivalent_flat_km: float


def effort_points(distance_km: float, elevation_gain_m: float) -> float:
    """Flat-equivalent effort: 100 m of climbing counts as 1 km."""
    return distance_km + elevation_gain_m / 100


def band_for_score(score: float) -> DifficultyBand:
    for band in DIFFICULTY_BANDS:
        if score < band.upper_bound:
            return band
    return DIFFICULTY_BANDS[-1]


def _gain_between(points: Sequence[AnalyzedPoint], start: int, end: int) -> float:
    """Elevation gained over points[start:end], with the noise floor."""
    gain = 0.0
    for i in range(max(start, 1), min(end, len(points))):
        diff = points[i].ele - points[i - 1].ele
        if diff > ELEVATION_NOISE_FLOOR_M:
            gain += diff
    return gain


def terrain_tags(stats: RouteStats) -> List[str]:
    """
    Independent terrain checks, in priority order.

    Returns every tag that fires; callers keep the first two.
    """
    tags = []
    points = stats.points

    if stats.max_elevation > HIGH_ALTITUDE_M:
        tags.append("High Altitude")
    elif stats.max_elevation > ALPINE_M:
        tags.append("Alpine")

    edge = int(len(points) * EDGE_FRACTION)
    if edge > 0 and stats.elevation_gain > 0:
        start_gain = _gain_between(points, 1, edge + 1)
        if start_gain > stats.elevation_gain * STEEP_START_GAIN_SHARE:
            tags.append("Steep Start")

        finish_gain = _gain_between(points, len(points) - edge, len(points))
        if finish_gain > UPHILL_FINISH_GAIN_M:
            tags.append("Uphill Finish")

    if stats.total_distance > 0:
        breakdown = stats.slope_breakdown
        steep_km = sum(breakdown.get(band, 0.0) for band in STEEP_BANDS)
        if steep_km / stats.total_distance > STEEP_DISTANCE_SHARE:
            tags.append("Technical/Steep")
        if breakdown.get("flat", 0.0) / stats.total_distance > FLAT_DISTANCE_SHARE:
            tags.append("Mostly Flat")

    return tags


def rate_difficulty(stats: RouteStats) -> DifficultyRating:
    """
    Rate a route.

    Args:
        stats: Full-precision route statistics

    Returns:
        DifficultyRating with band, presentation fields and terrain tags
    """
    score = effort_points(stats.total_distance, stats.elevation_gain)
    band = band_for_score(score)
    tags = terrain_tags(stats)[:MAX_TERRAIN_TAGS]

    return DifficultyRating(
        score=score,
        level=band.level,
        label=band.label,
        description=band.description,
        color=band.color,
        terrain_tags=", ".join(tags) if tags else DEFAULT_TERRAIN_TAG,
        equivalent_flat_km=score,
    )
