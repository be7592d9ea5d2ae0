"""
Daylight safety: does the hike finish after sunset?
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SafetyMetrics:
    finish_time: datetime
    sunset_time: Optional[datetime]
    is_night_hiking: bool


def compute_safety(
    start_time: datetime,
    duration_minutes: float,
    sunset: Optional[datetime] = None,
) -> SafetyMetrics:
    """
    Finish time and night-hiking flag.

    A sunset for a different calendar date than the start is ignored,
    as is a missing one; both report is_night_hiking=False. A
    timezone-aware sunset paired with a naive start is converted to the
    machine's local time before comparing.

    Args:
        start_time: Planned start (local time)
        duration_minutes: Chosen time estimate
        sunset: Sunset for the hike date, from the weather forecast

    Returns:
        SafetyMetrics
    """
    finish_time = start_time + timedelta(minutes=duration_minutes)

    # Forecast times are naive local times at the route; an aware sunset
    # against a naive start is converted to local wall-clock time first
    if sunset is not None and sunset.tzinfo is None and start_time.tzinfo is not None:
        sunset = sunset.replace(tzinfo=start_time.tzinfo)
    elif sunset is not None and sunset.tzinfo is not None and start_time.tzinfo is None:
        sunset = sunset.astimezone().replace(tzinfo=None)

    if sunset is not None and sunset.date() != start_time.date():
        logger.warning(
            f"Sunset date {sunset.date()} does not match start date "
            f"{start_time.date()}, ignoring"
        )
        sunset = None

    is_night = sunset is not None and finish_time > sunset

    return SafetyMetrics(
        finish_time=finish_time,
        sunset_time=sunset,
        is_night_hiking=is_night,
    )
