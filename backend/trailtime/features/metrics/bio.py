"""
Bio-energetic estimates: calories (MET model) and water.
"""

from dataclasses import dataclass
from typing import Optional

from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile, PackWeight

BODY_WEIGHT_KG = 75.0
PACK_WEIGHT_KG = {
    PackWeight.LIGHT: 0.0,
    PackWeight.MEDIUM: 7.0,
    PackWeight.HEAVY: 15.0,
}

# Metabolic equivalents
MET_HIKING = 3.5
MET_FAST = 5.0
MET_RUNNING = 8.0
MET_PER_GRADE_PERCENT = 0.3

# Water (L/h)
WATER_BASE_RATE = 0.5
# (threshold °C, extra L/h); cumulative
WATER_TEMPERATURE_STEPS = (
    (20.0, 0.2),
    (28.0, 0.3),
    (35.0, 0.2),
)
WATER_FAST_PACE_EXTRA = 0.2
WATER_STEEP_EXTRA = 0.1
WATER_STEEP_GRADE_PERCENT = 8.0


@dataclass(frozen=True)
class BioMetrics:
    calories: int   # kcal
    water: float    # liters, 1 decimal


def met_value(profile: HikerProfile, avg_grade_percent: float) -> float:
    """MET for the walking style, plus a climbing increment."""
    if profile.pace.is_running:
        met = MET_RUNNING
    elif profile.pace.is_fast:
        met = MET_FAST
    else:
        met = MET_HIKING
    return met + avg_grade_percent * MET_PER_GRADE_PERCENT


def water_rate(
    profile: HikerProfile,
    avg_grade_percent: float,
    max_temp: Optional[float] = None,
) -> float:
    """Liters per hour; temperature bands apply only when known."""
    rate = WATER_BASE_RATE

    if max_temp is not None:
        for threshold, extra in WATER_TEMPERATURE_STEPS:
            if max_temp > threshold:
                rate += extra

    if profile.pace.is_fast or profile.pace.is_running:
        rate += WATER_FAST_PACE_EXTRA
    if avg_grade_percent > WATER_STEEP_GRADE_PERCENT:
        rate += WATER_STEEP_EXTRA

    return rate


def compute_bio_metrics(
    stats: RouteStats,
    profile: HikerProfile,
    duration_minutes: float,
    max_temp: Optional[float] = None,
) -> BioMetrics:
    """
    Calories and water for a planned hike.

    Args:
        stats: Route statistics
        profile: Hiker profile (pace and pack weight)
        duration_minutes: Chosen time estimate
        max_temp: Day's maximum temperature, if a forecast is available

    Returns:
        BioMetrics
    """
    hours = max(0.0, duration_minutes) / 60
    grade = stats.average_grade_percent
    total_weight = BODY_WEIGHT_KG + PACK_WEIGHT_KG[profile.pack_weight]

    calories = round(met_value(profile, grade) * total_weight * hours)
    water = round(water_rate(profile, grade, max_temp) * hours, 1)

    return BioMetrics(calories=calories, water=water)
