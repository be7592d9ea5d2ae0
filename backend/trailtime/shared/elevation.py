"""
Elevation series helpers: smoothing and noise-filtered gain/loss.
"""
from typing import List, Sequence, Tuple

# Sensor noise: steps at or below this magnitude are ignored for gain/loss
ELEVATION_NOISE_FLOOR_M = 0.5


def moving_average(values: Sequence[float], window_size: int = 5) -> List[float]:
    """
    Centered moving average with a clipped window.

    Near either end of the sequence the window shrinks to whatever
    neighbours exist instead of padding, so endpoints stay close to
    their raw values.

    Args:
        values: Raw values (elevations, slopes)
        window_size: Nominal window width in samples

    Returns:
        Smoothed values, same length as input
    """
    if window_size <= 1:
        return list(values)

    half = window_size // 2
    last = len(values) - 1
    result = []
    for i in range(len(values)):
        lo, hi = max(0, i - half), min(last, i + half)
        result.append(sum(values[lo:hi + 1]) / (hi - lo + 1))
    return result


def calculate_elevation_changes(
    elevations: Sequence[float],
    noise_floor_m: float = ELEVATION_NOISE_FLOOR_M
) -> Tuple[float, float]:
    """
    Total (gain_m, loss_m), both positive.

    Steps with |diff| <= noise_floor_m are treated as sensor noise.
    """
    diffs = [b - a for a, b in zip(elevations, elevations[1:])]
    gain = sum(d for d in diffs if d > noise_floor_m)
    loss = sum(-d for d in diffs if d < -noise_floor_m)
    return float(gain), float(loss)
