"""
CLI tests (click.testing.CliRunner).
"""

import pytest
from click.testing import CliRunner

from trailtime.cli import cli

GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <trk><trkseg>
    <trkpt lat="0.0" lon="0.000"><ele>100</ele></trkpt>
    <trkpt lat="0.0" lon="0.010"><ele>150</ele></trkpt>
    <trkpt lat="0.0" lon="0.020"><ele>220</ele></trkpt>
    <trkpt lat="0.0" lon="0.030"><ele>180</ele></trkpt>
  </trkseg></trk>
</gpx>
"""


@pytest.fixture
def gpx_file(tmp_path):
    path = tmp_path / "route.gpx"
    path.write_text(GPX)
    return path


def test_analyze_summary(gpx_file):
    result = CliRunner().invoke(cli, ["analyze", str(gpx_file), "--no-breaks"])

    assert result.exit_code == 0, result.output
    assert "Distance:" in result.output
    assert "Naismith's Rule (Modified)" in result.output
    assert "Smart estimate" in result.output
    assert "Difficulty:" in result.output


def test_analyze_json(gpx_file):
    result = CliRunner().invoke(
        cli, ["analyze", str(gpx_file), "--json", "--start", "08:30", "--date", "2024-06-01"]
    )

    assert result.exit_code == 0, result.output
    assert '"finish_time": "2024-06-01T' in result.output
    assert '"elevation_gain_m": 120' in result.output


def test_bad_start_time(gpx_file):
    result = CliRunner().invoke(cli, ["analyze", str(gpx_file), "--start", "late"])
    assert result.exit_code == 2


def test_invalid_gpx(tmp_path):
    path = tmp_path / "broken.gpx"
    path.write_text("<gpx><trk>")

    result = CliRunner().invoke(cli, ["analyze", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_not_utf8_gpx(tmp_path):
    path = tmp_path / "binary.gpx"
    path.write_bytes(b"\xff\xfe<gpx>\x80</gpx>")

    result = CliRunner().invoke(cli, ["analyze", str(path)])

    assert result.exit_code == 1
    assert "Error:" in result.output
