"""
Command line interface.

Usage:
    trailtime analyze route.gpx
    trailtime analyze route.gpx --fitness athletic --pace fast --start 08:30 --date 2024-07-14 --weather
"""

import asyncio
import logging
import sys
from datetime import datetime, date
from pathlib import Path

import click

from trailtime.config import settings
from trailtime.errors import EmptyTrackError, GPXParseError
from trailtime.features.gpx import GPXParserService
from trailtime.features.hiking import FitnessLevel, HikerProfile, PaceType, PackWeight
from trailtime.features.route import MAX_SMOOTHING_LEVEL
from trailtime.schemas import AnalysisResponse
from trailtime.services import AnalysisService
from trailtime.shared.formatters import format_distance_km, format_duration, format_elevation


def _choices(enum_cls) -> click.Choice:
    return click.Choice([member.value for member in enum_cls], case_sensitive=False)


@click.group()
@click.option('--log-level', default=None, help="Override LOG_LEVEL")
def cli(log_level):
    """GPX route analysis and hiking time estimation."""
    logging.basicConfig(
        level=getattr(logging, (log_level or settings.log_level).upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@cli.command()
@click.argument('gpx_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--fitness', type=_choices(FitnessLevel), default=FitnessLevel.AVERAGE.value, show_default=True)
@click.option('--pace', type=_choices(PaceType), default=PaceType.STEADY.value, show_default=True)
@click.option('--pack', 'pack_weight', type=_choices(PackWeight), default=PackWeight.LIGHT.value, show_default=True)
@click.option('--breaks/--no-breaks', default=True, show_default=True, help="Add rest breaks")
@click.option('--smoothing', type=click.IntRange(0, MAX_SMOOTHING_LEVEL), default=0, show_default=True)
@click.option('--start', 'start_clock', default=None, help="Planned start time (HH:MM)")
@click.option('--date', 'hike_date', type=click.DateTime(formats=["%Y-%m-%d"]), default=None,
              help="Hike date (YYYY-MM-DD), defaults to today")
@click.option('--weather/--no-weather', default=False, show_default=True, help="Fetch forecast")
@click.option('--json', 'as_json', is_flag=True, help="Print the API response model as JSON")
def analyze(gpx_file, fitness, pace, pack_weight, breaks, smoothing,
            start_clock, hike_date, weather, as_json):
    """Analyze a GPX file."""
    profile = HikerProfile(
        fitness=FitnessLevel(fitness),
        pace=PaceType(pace),
        pack_weight=PackWeight(pack_weight),
        include_breaks=breaks,
    )

    day = hike_date.date() if hike_date else date.today()
    start_time = None
    if start_clock:
        try:
            clock = datetime.strptime(start_clock, "%H:%M").time()
        except ValueError:
            raise click.BadParameter("expected HH:MM", param_hint="--start")
        start_time = datetime.combine(day, clock)

    try:
        points = GPXParserService.extract_points(gpx_file.read_bytes())
    except (GPXParseError, EmptyTrackError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    service = AnalysisService()
    result, warnings = asyncio.run(
        service.analyze(
            points,
            profile,
            smoothing_level=smoothing,
            start_time=start_time,
            fetch_weather=weather,
            weather_date=day,
        )
    )

    if as_json:
        click.echo(AnalysisResponse.from_result(result, warnings).model_dump_json(indent=2))
        return

    stats = result.stats
    click.echo(f"Distance:   {format_distance_km(stats.total_distance)}")
    click.echo(f"Ascent:     {format_elevation(stats.elevation_gain)}")
    click.echo(f"Descent:    {format_elevation(-stats.elevation_loss)}")
    click.echo(f"Elevation:  {stats.min_elevation:.0f} - {stats.max_elevation:.0f} m")
    click.echo(f"Avg slope:  {stats.avg_slope:.1f}%")
    click.echo("")

    for estimation in result.estimations:
        click.echo(f"{estimation.method:<32} {format_duration(estimation.time_minutes)}")
    click.echo(
        f"{'Smart estimate (' + result.smart.method.value + ')':<32} "
        f"{format_duration(result.smart.value)}"
    )
    click.echo(f"  {result.smart.reason}")
    click.echo("")

    difficulty = result.difficulty
    click.echo(
        f"Difficulty: {difficulty.label} ({difficulty.score:.1f} effort km) "
        f"- {difficulty.terrain_tags}"
    )
    click.echo(f"Calories:   {result.bio.calories} kcal")
    click.echo(f"Water:      {result.bio.water:.1f} L")

    if result.safety:
        safety = result.safety
        line = f"Finish:     {safety.finish_time:%H:%M}"
        if safety.sunset_time:
            line += f" (sunset {safety.sunset_time:%H:%M})"
        click.echo(line)

    for warning in warnings:
        click.echo(f"Warning: {warning}", err=True)


if __name__ == '__main__':
    cli()
