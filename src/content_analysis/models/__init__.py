"""Data models for the content analysis pipeline."""

from .entities import (
    AnalysisResult,
    BatchResult,
    ContentMetrics,
    DocumentExtraction,
    DocumentOutcome,
    ExtractionSource,
    ExtractionUnit,
    Page,
    RasterSource,
    SourceFile,
)

__all__ = [
    "AnalysisResult",
    "BatchResult",
    "ContentMetrics",
    "DocumentExtraction",
    "DocumentOutcome",
    "ExtractionSource",
    "ExtractionUnit",
    "Page",
    "RasterSource",
    "SourceFile",
]
