"""
Shared speed model.

Combined speed = base speed (fitness) x pace multiplier x pack correction.
Used by Naismith, Tobler (as a rescale), Munter, DIN 33466 and Petzoldt.
"""

import math

from .profile import FitnessLevel, HikerProfile, PackWeight, PaceType

# Flat-ground speed by fitness tier (km/h)
FITNESS_BASE_SPEED_KMH = {
    FitnessLevel.SEDENTARY: 2.5,
    FitnessLevel.UNTRAINED: 3.0,
    FitnessLevel.CASUAL: 3.5,
    FitnessLevel.AVERAGE: 4.0,  # Naismith-style baseline
    FitnessLevel.ATHLETIC: 5.0,
    FitnessLevel.ELITE: 6.0,
    FitnessLevel.PRO: 7.0,
}

PACE_MULTIPLIERS = {
    PaceType.PHOTOGRAPHY: 0.6,  # stopping often
    PaceType.RELAXED: 0.8,
    PaceType.STEADY: 1.0,
    PaceType.BRISK: 1.1,
    PaceType.FAST: 1.2,
    PaceType.POWER_HIKE: 1.4,
    PaceType.TRAIL_RUN: 1.8,
    PaceType.SKY_RUN: 2.4,
}

# Langmuir-style load correction
PACK_WEIGHT_FACTORS = {
    PackWeight.LIGHT: 1.0,
    PackWeight.MEDIUM: 0.95,
    PackWeight.HEAVY: 0.85,
}

# Fitter hikers climb faster (m/h of ascent)
STRONG_CLIMBERS = frozenset({FitnessLevel.ELITE, FitnessLevel.PRO})
STRONG_CLIMB_M_PER_HOUR = 800.0
DEFAULT_CLIMB_M_PER_HOUR = 600.0

BREAK_MINUTES_PER_HOUR = 10


def get_base_speed(fitness: FitnessLevel) -> float:
    """Flat-ground speed for a fitness tier."""
    return FITNESS_BASE_SPEED_KMH[fitness]


def get_pace_multiplier(pace: PaceType) -> float:
    """Speed multiplier for a walking style."""
    return PACE_MULTIPLIERS[pace]


def get_pack_factor(pack_weight: PackWeight) -> float:
    """Speed correction for pack weight."""
    return PACK_WEIGHT_FACTORS[pack_weight]


def combined_speed(profile: HikerProfile) -> float:
    """
    Effective flat speed for a hiker profile.

    Returns:
        Speed in km/h
    """
    return (
        get_base_speed(profile.fitness) *
        get_pace_multiplier(profile.pace) *
        get_pack_factor(profile.pack_weight)
    )


def climb_rate(fitness: FitnessLevel) -> float:
    """Vertical meters per hour used by Naismith."""
    if fitness in STRONG_CLIMBERS:
        return STRONG_CLIMB_M_PER_HOUR
    return DEFAULT_CLIMB_M_PER_HOUR


def rest_break_hours(moving_hours: float, profile: HikerProfile) -> float:
    """
    Rest time to add on top of moving time.

    10 minutes per completed hour of moving time; none for running
    styles or when breaks are disabled.
    """
    if not profile.include_breaks or profile.pace.is_running:
        return 0.0
    return math.floor(moving_hours) * BREAK_MINUTES_PER_HOUR / 60
