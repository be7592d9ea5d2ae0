"""
Petzoldt Calculator

Energy-mile method (Paul Petzoldt, NOLS).
"""

from trailtime.shared.formulas import petzoldt_time
from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile
from trailtime.features.hiking.speed import combined_speed

from .base import TimeCalculator


class PetzoldtCalculator(TimeCalculator):
    """Energy miles: every 152.4 m of gain adds 1 km of flat walking."""

    @property
    def name(self) -> str:
        return "Petzoldt Energy Miles"

    @property
    def description(self) -> str:
        return (
            "Expedition rule of thumb: each 500 ft of climbing "
            "counts as an extra mile of flat walking."
        )

    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        return petzoldt_time(
            stats.total_distance,
            stats.elevation_gain,
            combined_speed(profile),
        )
