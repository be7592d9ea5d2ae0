"""
Derived metrics: difficulty, bio-energetics, daylight safety.
"""
from .difficulty import (
    DifficultyLevel,
    DifficultyRating,
    DIFFICULTY_BANDS,
    effort_points,
    rate_difficulty,
    terrain_tags,
)
from .bio import BioMetrics, compute_bio_metrics
from .safety import SafetyMetrics, compute_safety

__all__ = [
    "DifficultyLevel",
    "DifficultyRating",
    "DIFFICULTY_BANDS",
    "effort_points",
    "rate_difficulty",
    "terrain_tags",
    "BioMetrics",
    "compute_bio_metrics",
    "SafetyMetrics",
    "compute_safety",
]
