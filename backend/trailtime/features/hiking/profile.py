"""
Hiker profile options.

Each enum member maps to one entry in the lookup tables of
trailtime.features.hiking.speed.
"""

from dataclasses import dataclass
from enum import Enum


class FitnessLevel(str, Enum):
    """Fitness tier, slowest to fastest."""
    SEDENTARY = "sedentary"
    UNTRAINED = "untrained"
    CASUAL = "casual"
    AVERAGE = "average"
    ATHLETIC = "athletic"
    ELITE = "elite"
    PRO = "pro"


class PaceType(str, Enum):
    """Walking style, slowest to fastest."""
    PHOTOGRAPHY = "photography"
    RELAXED = "relaxed"
    STEADY = "steady"
    BRISK = "brisk"
    FAST = "fast"
    POWER_HIKE = "power_hike"
    TRAIL_RUN = "trail_run"
    SKY_RUN = "sky_run"

    @property
    def is_running(self) -> bool:
        return self in RUNNING_PACES

    @property
    def is_fast(self) -> bool:
        """Fast hiking (not running)."""
        return self in FAST_PACES


RUNNING_PACES = frozenset({PaceType.TRAIL_RUN, PaceType.SKY_RUN})
FAST_PACES = frozenset({PaceType.FAST, PaceType.POWER_HIKE})


class PackWeight(str, Enum):
    """Backpack weight category."""
    LIGHT = "light"     # < 5 kg
    MEDIUM = "medium"   # 5-10 kg
    HEAVY = "heavy"     # > 10 kg


@dataclass(frozen=True)
class HikerProfile:
    """Profile for hiking time estimation."""
    fitness: FitnessLevel = FitnessLevel.AVERAGE
    pace: PaceType = PaceType.STEADY
    pack_weight: PackWeight = PackWeight.LIGHT
    include_breaks: bool = True
