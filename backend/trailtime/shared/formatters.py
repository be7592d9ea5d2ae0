"""
Human readable values for the CLI and API text fields.
"""
import math


def round_half_up(value: float) -> int:
    """Nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def format_duration(minutes: float) -> str:
    """
    Format minutes as '2h 30m' (or '45 min' under an hour).

    Negative input renders as a dash.
    """
    if minutes < 0:
        return "—"

    hours, mins = divmod(round_half_up(minutes), 60)
    if not hours:
        return f"{mins} min"
    return f"{hours}h {mins}m"


def format_distance_km(km: float) -> str:
    """'12.5 km', or meters below one kilometer ('850 m')."""
    if km < 1:
        return f"{int(km * 1000)} m"
    return f"{km:.1f} km"


def format_elevation(meters: float) -> str:
    """Signed whole meters: '+850 m', '-120 m'."""
    return f"{round(meters):+d} m"
