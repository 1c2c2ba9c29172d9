"""Factory for constructing a fully wired ContentPipeline."""

from typing import Optional

from .analysis.analyzer import ContentAnalyzer
from .config import Settings, get_settings
from .extractors.orchestrator import DocumentExtractionOrchestrator
from .extractors.page_extractor import PageTextExtractor
from .extractors.renderers import ImageRenderer, PDFRenderer
from .ocr.base import OCREngine
from .ocr.tesseract_engine import TesseractOCREngine
from .pipeline import ContentPipeline


def build_pipeline(
    settings: Optional[Settings] = None,
    ocr_engine: Optional[OCREngine] = None,
) -> ContentPipeline:
    """Build a ContentPipeline wired with PyMuPDF rendering and Tesseract OCR.

    ocr_engine: pass a custom engine to replace Tesseract.
    """
    settings = settings or get_settings()

    if ocr_engine is None:
        ocr_engine = TesseractOCREngine(
            tesseract_cmd=settings.tesseract_cmd,
            timeout_seconds=settings.ocr_timeout_seconds,
            retry_attempts=settings.ocr_retry_attempts,
        )
        # Missing tesseract is not fatal: born-digital PDFs still extract.
        ocr_engine.is_available()

    orchestrator = DocumentExtractionOrchestrator(
        page_extractor=PageTextExtractor(ocr_engine),
        pdf_renderer=PDFRenderer(),
        image_renderer=ImageRenderer(),
    )
    return ContentPipeline(
        orchestrator=orchestrator,
        analyzer=ContentAnalyzer(),
        max_file_size_bytes=settings.max_file_size_bytes,
    )
