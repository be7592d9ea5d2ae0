"""
Hiking time estimation.

Usage:
    from trailtime.features.hiking import HikerProfile, estimate_all
    from trailtime.features.hiking.calculators import ToblerCalculator

Available components:
- HikerProfile + FitnessLevel/PaceType/PackWeight: user options
- speed: shared speed model and rest breaks
- calculators: five independent time estimators
- aggregator: mean/median smart aggregate
"""
from .profile import (
    FitnessLevel,
    PaceType,
    PackWeight,
    HikerProfile,
)
from .speed import combined_speed, rest_break_hours
from .calculators import TimeEstimation, ALL_CALCULATORS, estimate_all
from .aggregator import (
    AggregateMethod,
    SmartAggregate,
    aggregate_minutes,
    aggregate_estimates,
)

__all__ = [
    "FitnessLevel",
    "PaceType",
    "PackWeight",
    "HikerProfile",
    "combined_speed",
    "rest_break_hours",
    "TimeEstimation",
    "ALL_CALCULATORS",
    "estimate_all",
    "AggregateMethod",
    "SmartAggregate",
    "aggregate_minutes",
    "aggregate_estimates",
]
