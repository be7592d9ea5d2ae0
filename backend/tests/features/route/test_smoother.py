"""
Tests for downsampling and smoothing.
"""

import math

import pytest

from trailtime.errors import EmptyTrackError
from trailtime.features.route import (
    AnalyzedPoint,
    reduce_track,
    smooth_track,
    slope_breakdown,
    downsample_stride,
    DISPLAY_TARGET_POINTS,
)


@pytest.fixture
def long_track(make_track):
    """5000 points on a rolling profile."""
    elevations = [1000 + 50 * math.sin(i / 40) for i in range(5000)]
    return make_track(elevations, step_km=0.01)


class TestDownsample:

    def test_stride(self):
        assert downsample_stride(5000) == 5
        assert downsample_stride(1000) == 1
        assert downsample_stride(1001) == 2
        assert downsample_stride(1) == 1

    def test_level_zero_length(self, long_track):
        stride = downsample_stride(len(long_track))
        smoothed = smooth_track(long_track, level=0)

        assert len(smoothed) == math.ceil(5000 / stride)
        assert len(smoothed) <= DISPLAY_TARGET_POINTS

    def test_level_zero_keeps_raw_elevation(self, long_track):
        smoothed = smooth_track(long_track, level=0)
        assert [p.ele for p in smoothed[:3]] == [p.ele for p in long_track[0:15:5]]

    def test_slope_recomputed_not_carried(self, make_track):
        """Incoming slope values are discarded."""
        raw = make_track([100 + i for i in range(2000)], step_km=0.1)
        analyzed = [
            AnalyzedPoint(p.lat, p.lon, p.ele, dist_from_start=0.0, slope=999.0)
            for p in raw
        ]
        smoothed = smooth_track(analyzed, level=0)

        assert smoothed[0].slope == 0.0
        # 2 m over 200 m per downsampled step
        assert smoothed[1].slope == pytest.approx(1.0)
        assert all(p.slope != 999.0 for p in smoothed)

    def test_distances_from_full_track(self, long_track):
        stats = reduce_track(long_track)
        smoothed = smooth_track(stats.points, level=3)

        assert smoothed[1].dist_from_start == pytest.approx(stats.points[5].dist_from_start)
        assert smoothed[-1].dist_from_start <= stats.total_distance


class TestSmoothing:

    def test_invalid_level(self, long_track):
        with pytest.raises(ValueError):
            smooth_track(long_track, level=5)

    def test_empty_track(self):
        with pytest.raises(EmptyTrackError):
            smooth_track([], level=1)

    def test_smoothing_reduces_spike(self, make_track):
        elevations = [100.0] * 21
        elevations[10] = 200.0
        smoothed = smooth_track(make_track(elevations), level=1)

        assert smoothed[10].ele == pytest.approx(120.0)
        assert smoothed[0].ele == pytest.approx(100.0)

    def test_endpoints_under_smoothed(self, make_track):
        """Clipped window: the endpoint averages fewer samples than the interior."""
        elevations = [float(i * 10) for i in range(30)]
        smoothed = smooth_track(make_track(elevations), level=1)

        # Linear ramp: interior stays on the line, start is pulled upwards
        assert smoothed[15].ele == pytest.approx(150.0)
        assert smoothed[0].ele == pytest.approx(10.0)

    def test_returns_new_sequence(self, long_track):
        a = smooth_track(long_track, level=2)
        b = smooth_track(long_track, level=2)
        assert a == b
        assert a is not b


class TestSmoothedBreakdown:

    def test_sums_to_last_distance(self, long_track):
        smoothed = smooth_track(long_track, level=2)
        breakdown = slope_breakdown(smoothed)

        assert sum(breakdown.values()) == pytest.approx(smoothed[-1].dist_from_start)

    def test_single_point(self, make_track):
        smoothed = smooth_track(make_track([100]), level=4)
        assert sum(slope_breakdown(smoothed).values()) == 0.0
