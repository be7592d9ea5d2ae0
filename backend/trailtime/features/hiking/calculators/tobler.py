"""
Tobler Calculator

Tobler's Hiking Function (1993) integrated over every raw segment.
"""

from trailtime.shared.formulas import (
    tobler_segment_hours,
    TOBLER_REFERENCE_SPEED_KMH,
)
from trailtime.shared.geo import haversine
from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile
from trailtime.features.hiking.speed import combined_speed

from .base import TimeCalculator


class ToblerCalculator(TimeCalculator):
    """
    Tobler's Hiking Function (1993).

    Formula: Speed = 6 * exp(-3.5 * |gradient + 0.05|) km/h

    Key characteristics:
    - Maximum speed 6 km/h at -5% gradient (slight downhill)
    - Asymmetric: mild descent is faster than flat
    - Per-segment speed floored at 0.5 km/h

    The sum is made over the unsmoothed points of the route, then
    rescaled from the 6 km/h reference walker to the profile's speed.
    """

    @property
    def name(self) -> str:
        return "Tobler's Function (Integral)"

    @property
    def description(self) -> str:
        return (
            "Scientific: Analyzes the slope of every segment. "
            "Very accurate for variable terrain."
        )

    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        points = stats.points
        reference_hours = 0.0

        for i in range(1, len(points)):
            p1 = points[i - 1]
            p2 = points[i]
            distance_km = haversine(p1.lat, p1.lon, p2.lat, p2.lon)
            reference_hours += tobler_segment_hours(distance_km, p2.ele - p1.ele)

        scale_factor = TOBLER_REFERENCE_SPEED_KMH / combined_speed(profile)
        return reference_hours * scale_factor
