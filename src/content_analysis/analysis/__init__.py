"""Deterministic engagement analysis."""

from .analyzer import ContentAnalyzer, analyze_text
from .features import compute_metrics

__all__ = ["ContentAnalyzer", "analyze_text", "compute_metrics"]
