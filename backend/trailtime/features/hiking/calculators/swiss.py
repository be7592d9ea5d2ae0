"""
Swiss Calculator

DIN 33466 hiking norm as used on Swiss and German trail signage.
"""

from trailtime.shared.formulas import din33466_time
from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile
from trailtime.features.hiking.speed import combined_speed

from .base import TimeCalculator


class SwissCalculator(TimeCalculator):
    """
    DIN 33466.

    Baseline hiker: 4 km/h, 400 m/h up, 800 m/h down, all scaled by
    combined_speed / 4. Total = max(horizontal, vertical)
    + half of min(horizontal, vertical).
    """

    @property
    def name(self) -> str:
        return "Swiss Method (DIN 33466)"

    @property
    def description(self) -> str:
        return (
            "Trail signage standard: the slower of horizontal and vertical "
            "time counts fully, the faster one by half."
        )

    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        return din33466_time(
            stats.total_distance,
            stats.elevation_gain,
            stats.elevation_loss,
            combined_speed(profile),
        )
