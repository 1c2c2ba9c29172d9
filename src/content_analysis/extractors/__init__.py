"""Document text extraction with OCR fallback."""

from .base import DocumentRenderer, PageHandle
from .orchestrator import DocumentExtractionOrchestrator
from .page_extractor import PageTextExtractor
from .renderers import ImageRenderer, PDFRenderer

__all__ = [
    "DocumentRenderer",
    "PageHandle",
    "DocumentExtractionOrchestrator",
    "PageTextExtractor",
    "ImageRenderer",
    "PDFRenderer",
]
