"""
Mathematical formulas for route time calculations.

These formulas are used by different calculators across the application.
Centralizing them here eliminates duplication and ensures consistency.
All functions return hours.
"""

import math

# Tobler reference walker (km/h) and the floor applied per segment
TOBLER_REFERENCE_SPEED_KMH = 6.0
TOBLER_MIN_SPEED_KMH = 0.5

# DIN 33466 baseline hiker
DIN_BASE_SPEED_KMH = 4.0
DIN_ASCENT_M_PER_HOUR = 400.0
DIN_DESCENT_M_PER_HOUR = 800.0

# Petzoldt: ~500 ft of gain costs one extra mile
PETZOLDT_METERS_PER_KM = 152.4

# Munter: 100 m of gain counts as 1 km of flat walking
MUNTER_METERS_PER_UNIT = 100.0


def tobler_hiking_speed(gradient_decimal: float) -> float:
    """
    Calculate walking speed using Tobler's Hiking Function (1993).

    Formula: v = 6 * exp(-3.5 * |s + 0.05|)

    Args:
        gradient_decimal: Slope as decimal (0.10 = 10%, -0.05 = -5%)
                         Positive = uphill, Negative = downhill

    Returns:
        Speed in km/h

    Notes:
        - Maximum speed (6 km/h) at -5% gradient (slight downhill)
        - Speed decreases exponentially with steeper gradients
        - Works well for typical hiking terrain

    References:
        Tobler, W. (1993). Three Presentations on Geographical Analysis
        and Modeling. NCGIA Technical Report 93-1.
    """
    OPTIMAL_GRADIENT = -0.05  # Slight downhill is optimal
    DECAY_RATE = 3.5

    exponent = -DECAY_RATE * abs(gradient_decimal - OPTIMAL_GRADIENT)
    return TOBLER_REFERENCE_SPEED_KMH * math.exp(exponent)


def tobler_segment_hours(distance_km: float, elevation_diff_m: float) -> float:
    """
    Time to walk one segment at Tobler speed.

    Speed is clamped to TOBLER_MIN_SPEED_KMH so steep or noisy
    segments cannot produce unbounded times.

    Args:
        distance_km: Horizontal segment length
        elevation_diff_m: Signed elevation change over the segment

    Returns:
        Time in hours (0 for zero-length segments)
    """
    if distance_km <= 0:
        return 0.0

    gradient = elevation_diff_m / (distance_km * 1000)
    speed = max(tobler_hiking_speed(gradient), TOBLER_MIN_SPEED_KMH)
    return distance_km / speed


def naismith_time(
    distance_km: float,
    elevation_gain_m: float,
    speed_kmh: float = 5.0,
    climb_m_per_hour: float = 600.0
) -> float:
    """
    Naismith's Rule (1892) with a configurable flat speed and climb rate.

    Classic rule: 5 km/h + 1 hour per 600m of ascent.

    Notes:
        - Does not account for descent
    """
    horizontal_time = distance_km / speed_kmh
    ascent_time = elevation_gain_m / climb_m_per_hour

    return horizontal_time + ascent_time


def munter_time(
    distance_km: float,
    elevation_gain_m: float,
    speed_kmh: float
) -> float:
    """
    Munter method: elevation folded into flat-equivalent units.

    T = (distance + gain / 100) / speed
    """
    vertical_units = elevation_gain_m / MUNTER_METERS_PER_UNIT
    return (distance_km + vertical_units) / speed_kmh


def din33466_time(
    distance_km: float,
    elevation_gain_m: float,
    elevation_loss_m: float,
    speed_kmh: float
) -> float:
    """
    Swiss/German hiking norm DIN 33466.

    Horizontal and vertical times are computed separately; the larger
    one counts fully and the smaller one by half.

    Args:
        distance_km: Horizontal distance
        elevation_gain_m: Total ascent (400 m/h baseline)
        elevation_loss_m: Total descent (800 m/h baseline)
        speed_kmh: Hiker speed; 4 km/h is the norm's baseline

    Returns:
        Time in hours
    """
    speed_factor = speed_kmh / DIN_BASE_SPEED_KMH

    horizontal = distance_km / (DIN_BASE_SPEED_KMH * speed_factor)
    vertical = (
        elevation_gain_m / (DIN_ASCENT_M_PER_HOUR * speed_factor) +
        elevation_loss_m / (DIN_DESCENT_M_PER_HOUR * speed_factor)
    )

    return max(horizontal, vertical) + 0.5 * min(horizontal, vertical)


def energy_miles_km(distance_km: float, elevation_gain_m: float) -> float:
    """Petzoldt energy distance: flat km plus 1 km per 152.4 m of gain."""
    return distance_km + elevation_gain_m / PETZOLDT_METERS_PER_KM


def petzoldt_time(
    distance_km: float,
    elevation_gain_m: float,
    speed_kmh: float
) -> float:
    """Petzoldt energy-mile time: energy distance over flat speed."""
    return energy_miles_km(distance_km, elevation_gain_m) / speed_kmh
