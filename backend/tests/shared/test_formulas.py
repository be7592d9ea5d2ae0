"""
Tests for shared formulas module.

Tests the mathematical formulas used across calculators.
"""

import math

import pytest

from trailtime.shared.formulas import (
    tobler_hiking_speed,
    tobler_segment_hours,
    naismith_time,
    munter_time,
    din33466_time,
    energy_miles_km,
    petzoldt_time,
    TOBLER_MIN_SPEED_KMH,
)


# =============================================================================
# Test Tobler
# =============================================================================

class TestToblerHikingSpeed:
    """Tests for tobler_hiking_speed function."""

    def test_optimal_gradient(self):
        """Speed should be max (~6 km/h) at -5% gradient (slight downhill)."""
        assert tobler_hiking_speed(-0.05) == pytest.approx(6.0)

    def test_flat_terrain(self):
        """Speed should be ~5 km/h on flat terrain."""
        assert 4.9 < tobler_hiking_speed(0.0) < 5.1

    def test_steep_uphill(self):
        speed_10 = tobler_hiking_speed(0.10)
        speed_20 = tobler_hiking_speed(0.20)
        assert speed_10 < 5.0
        assert speed_20 < speed_10

    def test_formula_matches_documentation(self):
        """v = 6 * exp(-3.5 * |s + 0.05|)."""
        for s in (-0.3, -0.1, 0.0, 0.07, 0.25):
            assert tobler_hiking_speed(s) == pytest.approx(6 * math.exp(-3.5 * abs(s + 0.05)))


class TestToblerSegmentHours:
    """Tests for per-segment Tobler time with the speed floor."""

    def test_zero_length_segment(self):
        assert tobler_segment_hours(0.0, 10.0) == 0.0

    def test_flat_segment(self):
        assert tobler_segment_hours(1.0, 0.0) == pytest.approx(1.0 / tobler_hiking_speed(0.0))

    def test_velocity_floor_on_200_percent_grade(self):
        """1 km at 200% grade: speed clamps to 0.5 km/h -> 2 hours."""
        hours = tobler_segment_hours(1.0, 2000.0)
        assert math.isfinite(hours)
        assert hours == pytest.approx(1.0 / TOBLER_MIN_SPEED_KMH)

    def test_floor_applies_to_steep_descent(self):
        assert tobler_segment_hours(1.0, -2000.0) == pytest.approx(2.0)


# =============================================================================
# Test Whole-Route Formulas
# =============================================================================

class TestRouteFormulas:

    def test_naismith_classic(self):
        """5 km/h + 1 h per 600 m."""
        assert naismith_time(10.0, 600.0) == pytest.approx(3.0)

    def test_naismith_custom_speed(self):
        assert naismith_time(10.0, 800.0, speed_kmh=4.0, climb_m_per_hour=800.0) == pytest.approx(3.5)

    def test_munter(self):
        """(10 km + 600 m / 100) / 4 km/h = 4 h."""
        assert munter_time(10.0, 600.0, 4.0) == pytest.approx(4.0)

    def test_din33466_horizontal_dominates(self):
        """Horizontal 2.5 h, vertical 1.5 h -> 2.5 + 0.75."""
        assert din33466_time(10.0, 400.0, 400.0, 4.0) == pytest.approx(3.25)

    def test_din33466_vertical_dominates(self):
        """Horizontal 0.5 h, vertical 1200/400 = 3 h -> 3 + 0.25."""
        assert din33466_time(2.0, 1200.0, 0.0, 4.0) == pytest.approx(3.25)

    def test_din33466_scales_with_speed(self):
        slow = din33466_time(10.0, 400.0, 400.0, 4.0)
        fast = din33466_time(10.0, 400.0, 400.0, 8.0)
        assert fast == pytest.approx(slow / 2)

    def test_energy_miles(self):
        assert energy_miles_km(10.0, 152.4) == pytest.approx(11.0)

    def test_petzoldt(self):
        assert petzoldt_time(10.0, 304.8, 4.0) == pytest.approx(3.0)
