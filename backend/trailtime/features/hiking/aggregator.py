"""
Smart aggregate of the time estimates.

Mean when the methods agree, median when the mean is pulled away by
an outlier.
"""

import logging
import statistics
from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from .calculators.base import TimeEstimation

logger = logging.getLogger(__name__)

# Relative |mean - median| / median above which outliers are assumed
OUTLIER_DEVIATION_THRESHOLD = 0.10


class AggregateMethod(str, Enum):
    MEAN = "mean"
    MEDIAN = "median"


@dataclass(frozen=True)
class SmartAggregate:
    """Combined estimate in minutes."""
    value: float
    method: AggregateMethod
    reason: str


def aggregate_minutes(minutes: Sequence[float]) -> SmartAggregate:
    """
    Combine estimates into one value.

    Never raises: an empty sequence yields a zero result.

    Args:
        minutes: Estimated durations in minutes

    Returns:
        SmartAggregate with the chosen value and the reason
    """
    if not minutes:
        return SmartAggregate(
            value=0.0,
            method=AggregateMethod.MEAN,
            reason="No estimates available",
        )

    mean = statistics.fmean(minutes)
    median = statistics.median(minutes)

    if median > 0:
        deviation = abs(mean - median) / median
    else:
        deviation = 0.0 if mean == 0 else float("inf")

    if deviation > OUTLIER_DEVIATION_THRESHOLD:
        logger.debug(f"Outlier suspected: mean={mean:.1f}, median={median:.1f}")
        return SmartAggregate(
            value=float(median),
            method=AggregateMethod.MEDIAN,
            reason=(
                f"Mean deviates {deviation:.0%} from median; "
                f"outliers suspected, using median"
            ),
        )

    return SmartAggregate(
        value=mean,
        method=AggregateMethod.MEAN,
        reason=f"Methods align ({deviation:.0%} deviation), using mean",
    )


def aggregate_estimates(estimates: Sequence[TimeEstimation]) -> SmartAggregate:
    """Aggregate TimeEstimation records by their minutes."""
    return aggregate_minutes([e.time_minutes for e in estimates])
