"""
Slope classification for terrain bands.

Used by: track reduction, smoothing breakdown, difficulty tagging.
Single source of truth for slope band thresholds.

Bands are keyed {direction}_{strength}; "flat" has no direction.
"""

# Absolute slope boundaries (percent)
FLAT_SLOPE_MAX = 2.0
MILD_SLOPE_MAX = 8.0
MODERATE_SLOPE_MAX = 15.0

# 7 slope bands, ordered steepest descent -> steepest ascent
SLOPE_BANDS = (
    'steep_down',      # <= -15%
    'moderate_down',   # -15% to -8%
    'mild_down',       # -8% to -2%
    'flat',            # -2% to +2%
    'mild_up',         # +2% to +8%
    'moderate_up',     # +8% to +15%
    'steep_up',        # >= +15%
)

STEEP_BANDS = ('steep_down', 'steep_up')


def classify_slope(slope_percent: float | None) -> str:
    """
    Classify a signed slope into one of the 7 bands.

    Args:
        slope_percent: Slope as percentage (e.g., 10.0 for 10%), or None
                       for segments too short to carry a slope

    Returns:
        Band name (e.g., 'moderate_up', 'steep_down', 'flat')
    """
    if slope_percent is None:
        return 'flat'

    magnitude = abs(slope_percent)
    if magnitude < FLAT_SLOPE_MAX:
        return 'flat'

    direction = 'up' if slope_percent > 0 else 'down'
    if magnitude < MILD_SLOPE_MAX:
        return f'mild_{direction}'
    if magnitude < MODERATE_SLOPE_MAX:
        return f'moderate_{direction}'
    return f'steep_{direction}'


def empty_breakdown() -> dict[str, float]:
    """Slope breakdown with every band present and zero distance."""
    return {band: 0.0 for band in SLOPE_BANDS}
