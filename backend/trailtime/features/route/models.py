"""
Route value types.

Every pass (reduction, smoothing) builds new instances; nothing here is
mutated after construction.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple


@dataclass(frozen=True)
class TrackPoint:
    """One GPS sample as produced by the track parser."""
    lat: float  # degrees
    lon: float  # degrees
    ele: float  # meters

    @classmethod
    def from_tuple(cls, values: Tuple[float, float, float]) -> "TrackPoint":
        lat, lon, ele = values
        return cls(lat=float(lat), lon=float(lon), ele=float(ele))


@dataclass(frozen=True)
class AnalyzedPoint:
    """Track point with cumulative distance and slope from the previous point."""
    lat: float
    lon: float
    ele: float
    dist_from_start: float  # km, non-decreasing along the track
    slope: float = 0.0      # percent, signed


@dataclass(frozen=True)
class RouteStats:
    """
    Aggregate statistics of a full track.

    Values are kept at full precision; rounding belongs to the
    reporting layer (trailtime.schemas).
    """
    total_distance: float   # km
    elevation_gain: float   # m
    elevation_loss: float   # m
    max_elevation: float    # m
    min_elevation: float    # m
    avg_slope: float        # percent, mean of |slope| over qualifying segments
    slope_breakdown: Dict[str, float] = field(default_factory=dict)  # band -> km
    points: Tuple[AnalyzedPoint, ...] = ()

    @property
    def average_grade_percent(self) -> float:
        """Net climbing grade: gain over total horizontal distance."""
        if self.total_distance <= 0:
            return 0.0
        return self.elevation_gain / (self.total_distance * 1000) * 100


def as_track_points(raw: Iterable) -> list[TrackPoint]:
    """Accept TrackPoints or (lat, lon, ele) tuples."""
    return [
        p if isinstance(p, (TrackPoint, AnalyzedPoint)) else TrackPoint.from_tuple(p)
        for p in raw
    ]
