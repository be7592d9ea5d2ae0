"""
Hiking time calculators.

Available calculators:
- NaismithCalculator: Naismith's Rule with profile speed
- ToblerCalculator: Tobler's Hiking Function, integrated per segment
- MunterCalculator: Munter method (flat-equivalent units)
- SwissCalculator: DIN 33466
- PetzoldtCalculator: Petzoldt energy miles
"""
from typing import List

from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile

from .base import TimeCalculator, TimeEstimation
from .naismith import NaismithCalculator
from .tobler import ToblerCalculator
from .munter import MunterCalculator
from .swiss import SwissCalculator
from .petzoldt import PetzoldtCalculator

ALL_CALCULATORS: tuple[TimeCalculator, ...] = (
    ToblerCalculator(),
    NaismithCalculator(),
    MunterCalculator(),
    SwissCalculator(),
    PetzoldtCalculator(),
)


def estimate_all(stats: RouteStats, profile: HikerProfile) -> List[TimeEstimation]:
    """Run every calculator on the same inputs."""
    return [calculator.estimate(stats, profile) for calculator in ALL_CALCULATORS]


__all__ = [
    "TimeCalculator",
    "TimeEstimation",
    "NaismithCalculator",
    "ToblerCalculator",
    "MunterCalculator",
    "SwissCalculator",
    "PetzoldtCalculator",
    "ALL_CALCULATORS",
    "estimate_all",
]
