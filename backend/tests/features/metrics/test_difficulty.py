"""
Tests for difficulty scoring and terrain tags.
"""

import pytest

from trailtime.features.route import reduce_track
from trailtime.features.metrics import (
    DifficultyLevel,
    DIFFICULTY_BANDS,
    effort_points,
    rate_difficulty,
)
from trailtime.features.metrics.difficulty import band_for_score


class TestEffortPoints:

    def test_formula(self):
        assert effort_points(10.0, 500.0) == pytest.approx(15.0)

    def test_monotonic_in_distance(self):
        scores = [effort_points(d, 800.0) for d in (0, 1, 5, 10, 25, 60)]
        assert scores == sorted(scores)


class TestBands:

    def test_eight_bands(self):
        assert len(DIFFICULTY_BANDS) == 8

    @pytest.mark.parametrize("score, level", [
        (0.0, DifficultyLevel.VERY_EASY),
        (4.99, DifficultyLevel.VERY_EASY),
        (5.0, DifficultyLevel.EASY),
        (11.9, DifficultyLevel.MODERATE),
        (12.0, DifficultyLevel.CHALLENGING),
        (24.9, DifficultyLevel.HARD),
        (34.9, DifficultyLevel.DEMANDING),
        (44.9, DifficultyLevel.STRENUOUS),
        (45.0, DifficultyLevel.EXTREME),
        (500.0, DifficultyLevel.EXTREME),
    ])
    def test_band_lookup(self, score, level):
        assert band_for_score(score).level == level


class TestRateDifficulty:

    def test_flat_walk(self, flat_10km_track):
        rating = rate_difficulty(reduce_track(flat_10km_track))

        assert rating.level == DifficultyLevel.MODERATE
        assert rating.label == "Moderate"
        assert rating.score == pytest.approx(10.0)
        assert rating.equivalent_flat_km == rating.score
        assert rating.terrain_tags == "Mostly Flat"
        assert rating.color.startswith("#")

    def test_varied_terrain_default(self, make_track):
        """Rolling 5% grades: no check fires."""
        elevations = [100 if i % 2 == 0 else 105 for i in range(21)]
        rating = rate_difficulty(reduce_track(make_track(elevations)))
        assert rating.terrain_tags == "Varied Terrain"

    def test_high_altitude(self, make_track):
        rating = rate_difficulty(reduce_track(make_track([3000] * 21)))
        assert rating.terrain_tags == "High Altitude, Mostly Flat"

    def test_alpine(self, make_track):
        rating = rate_difficulty(reduce_track(make_track([2000] * 21)))
        assert rating.terrain_tags == "Alpine, Mostly Flat"

    def test_steep_start(self, make_track):
        elevations = [100, 200, 300, 400] + [400] * 17
        rating = rate_difficulty(reduce_track(make_track(elevations)))
        assert rating.terrain_tags == "Steep Start, Mostly Flat"

    def test_uphill_finish(self, make_track):
        elevations = [1000] * 18 + [1060, 1120, 1180]
        rating = rate_difficulty(reduce_track(make_track(elevations)))
        assert rating.terrain_tags == "Uphill Finish, Mostly Flat"

    def test_technical_steep(self, make_track):
        elevations = [100 if i % 2 == 0 else 120 for i in range(21)]
        rating = rate_difficulty(reduce_track(make_track(elevations)))
        assert rating.terrain_tags == "Technical/Steep"

    def test_at_most_two_tags(self, make_track):
        elevations = [2600, 2700, 2800, 2900] + [2900] * 17
        rating = rate_difficulty(reduce_track(make_track(elevations)))
        assert rating.terrain_tags == "High Altitude, Steep Start"

    def test_single_point(self, make_track):
        rating = rate_difficulty(reduce_track(make_track([100])))
        assert rating.level == DifficultyLevel.VERY_EASY
        assert rating.terrain_tags == "Varied Terrain"
