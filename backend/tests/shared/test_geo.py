"""
Tests for shared geographic functions.

Tests the haversine distance and slope calculations.
"""

import pytest

from trailtime.shared.geo import (
    haversine,
    cumulative_distances,
    grade,
    slope_percent,
    EARTH_RADIUS_KM,
)


# =============================================================================
# Test Haversine Distance
# =============================================================================

class TestHaversine:

    @pytest.mark.parametrize("lat1, lon1, lat2, lon2, expected_km", [
        (0.0, 0.0, 0.0, 1.0, 111.195),      # 1 degree along the equator
        (0.0, 0.0, 1.0, 0.0, 111.195),      # 1 degree along a meridian
        (45.0, 0.0, -45.0, 0.0, 10007.54),  # quarter meridian
        (0.0, 0.0, 0.0, 180.0, 20015.09),   # antipodes
    ])
    def test_reference_distances(self, lat1, lon1, lat2, lon2, expected_km):
        assert haversine(lat1, lon1, lat2, lon2) == pytest.approx(expected_km, rel=1e-4)

    def test_zero_for_identical_points(self):
        assert haversine(43.2, 76.9, 43.2, 76.9) == 0.0

    def test_order_independent(self):
        assert haversine(46.5, 7.9, 46.6, 8.1) == pytest.approx(haversine(46.6, 8.1, 46.5, 7.9))

    def test_crosses_antimeridian_the_short_way(self):
        """170E to 170W is 20 degrees apart, not 340."""
        assert haversine(0.0, 170.0, 0.0, -170.0) == pytest.approx(20 * 111.195, rel=1e-4)

    def test_uses_mean_earth_radius(self):
        assert EARTH_RADIUS_KM == 6371.0


# =============================================================================
# Test Gradient / Slope
# =============================================================================

class TestSlope:
    """Tests for gradient and slope helpers."""

    def test_zero_distance_grade(self):
        assert grade(0, 100) == 0.0

    def test_grade_fraction(self):
        assert grade(1.0, 100) == pytest.approx(0.10)

    def test_slope_percent_signed(self):
        assert slope_percent(0.1, 10) == pytest.approx(10.0)
        assert slope_percent(0.1, -5) == pytest.approx(-5.0)

    def test_sub_meter_segment_has_no_slope(self):
        """Segments of 1 m or less are too short for a slope."""
        assert slope_percent(0.001, 5) is None
        assert slope_percent(0.0005, 5) is None
        assert slope_percent(0.0, 0) is None


# =============================================================================
# Test Cumulative Distance
# =============================================================================

class TestCumulativeDistances:

    def test_empty(self):
        assert cumulative_distances([]) == []

    def test_starts_at_zero_and_accumulates(self, make_track):
        track = make_track([0, 10, 20, 10], step_km=0.5)
        distances = cumulative_distances(track)

        assert distances[0] == 0.0
        assert distances == pytest.approx([0.0, 0.5, 1.0, 1.5])

    def test_non_decreasing(self, make_track):
        track = make_track([0, 0, 0]) + make_track([0, 0])
        distances = cumulative_distances(track)

        assert all(b >= a for a, b in zip(distances, distances[1:]))
