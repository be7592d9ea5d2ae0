"""
Base types for time calculators.

Each calculator is stateless: the estimate is a pure function of
(RouteStats, HikerProfile).
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from trailtime.features.route.models import RouteStats
from trailtime.features.hiking.profile import HikerProfile
from trailtime.features.hiking.speed import rest_break_hours
from trailtime.shared.formatters import round_half_up


@dataclass(frozen=True)
class TimeEstimation:
    """Result of one estimation method."""
    method: str
    time_minutes: int
    description: str


class TimeCalculator(ABC):
    """
    Abstract base class for route time calculators.

    Subclasses implement moving_hours(); rest breaks and the conversion
    to whole minutes are shared.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Method name for display."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Short description of the method."""
        pass

    @abstractmethod
    def moving_hours(self, stats: RouteStats, profile: HikerProfile) -> float:
        """
        Moving time for the whole route, before rest breaks.

        Args:
            stats: Route statistics (full precision)
            profile: Hiker profile

        Returns:
            Time in hours
        """
        pass

    def estimate(self, stats: RouteStats, profile: HikerProfile) -> TimeEstimation:
        """Moving time plus breaks, as a TimeEstimation in minutes."""
        hours = self.moving_hours(stats, profile)
        hours += rest_break_hours(hours, profile)

        return TimeEstimation(
            method=self.name,
            time_minutes=max(0, round_half_up(hours * 60)),
            description=self.description,
        )
