"""Social media content analyzer: document text extraction and engagement scoring."""

from .pipeline import ContentPipeline
from .factory import build_pipeline
from .analysis.analyzer import ContentAnalyzer, analyze_text
from .extractors.orchestrator import DocumentExtractionOrchestrator
from .extractors.page_extractor import PageTextExtractor
from .ocr.base import OCREngine
from .errors import (
    ContentAnalysisError,
    DocumentProcessingFailed,
    FileTooLarge,
    FileTypeInvalid,
    NoTextExtracted,
    OCRFailure,
    PageExtractionFailed,
)
from .models.entities import (
    AnalysisResult,
    BatchResult,
    ExtractionUnit,
    RasterSource,
    SourceFile,
)

__all__ = [
    "ContentPipeline",
    "build_pipeline",
    "ContentAnalyzer",
    "analyze_text",
    "DocumentExtractionOrchestrator",
    "PageTextExtractor",
    "OCREngine",
    "ContentAnalysisError",
    "DocumentProcessingFailed",
    "FileTooLarge",
    "FileTypeInvalid",
    "NoTextExtracted",
    "OCRFailure",
    "PageExtractionFailed",
    "AnalysisResult",
    "BatchResult",
    "ExtractionUnit",
    "RasterSource",
    "SourceFile",
]
