"""
Shared fixtures.

Synthetic tracks run along the equator, where a longitude step converts
to distance exactly: d = R * dlon.
"""

import math

import pytest

from trailtime.features.route import TrackPoint

KM_PER_DEGREE = 6371.0 * math.pi / 180


def _make_track(elevations, step_km=0.1, lat=0.0):
    step_deg = step_km / KM_PER_DEGREE
    return [
        TrackPoint(lat=lat, lon=i * step_deg, ele=float(ele))
        for i, ele in enumerate(elevations)
    ]


@pytest.fixture
def make_track():
    """Factory: elevations (m) at fixed horizontal spacing -> TrackPoints."""
    return _make_track


@pytest.fixture
def flat_10km_track():
    """101 points, 100 m apart, constant elevation."""
    return _make_track([500.0] * 101, step_km=0.1)
