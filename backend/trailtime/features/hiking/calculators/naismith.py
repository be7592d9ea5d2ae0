"""
Naismith Calculator

Naismith's Rule (1892) driven by the profile's flat speed.
"""

from trailtime.shared.formulas import naismith_time
from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile
from trailtime.features.hiking.speed import combined_speed, climb_rate

from .base import TimeCalculator


class NaismithCalculator(TimeCalculator):
    """
    Naismith's Rule, modified.

    - Horizontal time at the profile's combined speed
    - +1 hour per 600m elevation gain (800m for elite/pro hikers)

    Descent is ignored, as in the 1892 rule.
    """

    @property
    def name(self) -> str:
        return "Naismith's Rule (Modified)"

    @property
    def description(self) -> str:
        return (
            "Classic calculation: distance + elevation gain. "
            "Adjusted for your fitness base speed."
        )

    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        return naismith_time(
            stats.total_distance,
            stats.elevation_gain,
            speed_kmh=combined_speed(profile),
            climb_m_per_hour=climb_rate(profile.fitness),
        )
