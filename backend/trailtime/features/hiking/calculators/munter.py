"""
Munter Calculator

Munter method (alpinism): elevation gain converted to flat-equivalent km.
"""

from trailtime.shared.formulas import munter_time
from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile, PackWeight
from trailtime.features.hiking.speed import combined_speed

from .base import TimeCalculator

# Extra hours per meter of descent when carrying a heavy pack
HEAVY_DESCENT_HOURS_PER_M = 1 / 1000


class MunterCalculator(TimeCalculator):
    """
    Munter method.

    T = (distance + gain / 100) / speed

    With a heavy pack, every 1000m of descent adds an hour.
    """

    @property
    def name(self) -> str:
        return "Munter Method"

    @property
    def description(self) -> str:
        return (
            "Alpinism: Converts elevation into 'flat km equivalents'. "
            "Ideal for steep mountain routes."
        )

    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        hours = munter_time(
            stats.total_distance,
            stats.elevation_gain,
            combined_speed(profile),
        )
        if profile.pack_weight == PackWeight.HEAVY:
            hours += stats.elevation_loss * HEAVY_DESCENT_HOURS_PER_M
        return hours
