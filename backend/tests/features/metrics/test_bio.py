"""
Tests for calorie and water estimates.
"""

import pytest

from trailtime.features.route import RouteStats
from trailtime.features.hiking import HikerProfile, PaceType, PackWeight
from trailtime.features.metrics import compute_bio_metrics


def make_stats(distance=10.0, gain=0.0):
    return RouteStats(
        total_distance=distance,
        elevation_gain=gain,
        elevation_loss=gain,
        max_elevation=500.0 + gain,
        min_elevation=500.0,
        avg_slope=0.0,
    )


class TestCalories:

    def test_flat_base_met(self):
        """3.5 MET * 75 kg * 2 h."""
        bio = compute_bio_metrics(make_stats(), HikerProfile(), 120)
        assert bio.calories == 525

    def test_pack_weight_added(self):
        profile = HikerProfile(pack_weight=PackWeight.HEAVY)
        bio = compute_bio_metrics(make_stats(), profile, 120)
        assert bio.calories == 630

    def test_fast_pace(self):
        profile = HikerProfile(pace=PaceType.FAST)
        bio = compute_bio_metrics(make_stats(), profile, 120)
        assert bio.calories == 750

    def test_running_pace(self):
        profile = HikerProfile(pace=PaceType.TRAIL_RUN)
        bio = compute_bio_metrics(make_stats(), profile, 120)
        assert bio.calories == 1200

    def test_grade_increment(self):
        """1000 m over 10 km = 10% grade -> MET 3.5 + 3.0."""
        bio = compute_bio_metrics(make_stats(gain=1000), HikerProfile(), 120)
        assert bio.calories == 975

    def test_zero_distance(self):
        bio = compute_bio_metrics(make_stats(distance=0.0), HikerProfile(), 0)
        assert bio.calories == 0
        assert bio.water == 0.0


class TestWater:

    def test_base_rate(self):
        bio = compute_bio_metrics(make_stats(), HikerProfile(), 120)
        assert bio.water == pytest.approx(1.0)

    @pytest.mark.parametrize("temp, expected", [
        (15.0, 1.0),
        (20.0, 1.0),
        (25.0, 1.4),
        (30.0, 2.0),
        (36.0, 2.4),
    ])
    def test_temperature_bands_cumulative(self, temp, expected):
        bio = compute_bio_metrics(make_stats(), HikerProfile(), 120, max_temp=temp)
        assert bio.water == pytest.approx(expected)

    def test_fast_pace_extra(self):
        profile = HikerProfile(pace=PaceType.POWER_HIKE)
        bio = compute_bio_metrics(make_stats(), profile, 120)
        assert bio.water == pytest.approx(1.4)

    def test_steep_extra(self):
        bio = compute_bio_metrics(make_stats(gain=1000), HikerProfile(), 120)
        assert bio.water == pytest.approx(1.2)

    def test_one_decimal(self):
        bio = compute_bio_metrics(make_stats(), HikerProfile(), 100)
        assert bio.water == round(bio.water, 1)
