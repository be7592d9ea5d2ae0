"""
Great-circle distance and segment slope.

All track geometry goes through these helpers; distances are kilometers,
elevations meters.
"""
import math
from typing import List, Sequence

# Mean Earth radius (km)
EARTH_RADIUS_KM = 6371.0

# Segments shorter than this carry no usable slope (1 meter)
MIN_SLOPE_DISTANCE_KM = 0.001


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Great-circle distance in km between two (lat, lon) points in degrees.
    """
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = math.radians(lon2 - lon1)

    h = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def cumulative_distances(points: Sequence) -> List[float]:
    """
    Running distance (km) from the first point for anything with lat/lon.

    The result has one entry per point and starts at 0.0.
    """
    if not points:
        return []
    distances = [0.0]
    for prev, curr in zip(points, points[1:]):
        distances.append(distances[-1] + haversine(prev.lat, prev.lon, curr.lat, curr.lon))
    return distances


def grade(distance_km: float, elevation_diff_m: float) -> float:
    """Rise over run as a fraction (0.10 = 10%); 0 for zero distance."""
    if distance_km <= 0:
        return 0.0
    return elevation_diff_m / (distance_km * 1000)


def slope_percent(distance_km: float, elevation_diff_m: float) -> float | None:
    """
    Signed slope of a segment in percent.

    Returns None for sub-meter segments, where rise/run is dominated
    by GPS jitter.
    """
    if distance_km <= MIN_SLOPE_DISTANCE_KM:
        return None
    return grade(distance_km, elevation_diff_m) * 100
