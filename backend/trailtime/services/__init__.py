"""Orchestration services."""
from .pipeline import AnalysisResult, compute
from .analysis import AnalysisService

__all__ = ["AnalysisResult", "compute", "AnalysisService"]
