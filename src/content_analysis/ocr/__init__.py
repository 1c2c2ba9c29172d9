"""OCR engines."""

from .base import OCREngine
from .tesseract_engine import TesseractOCREngine

__all__ = ["OCREngine", "TesseractOCREngine"]
