"""Per-page text extraction: native text layer first, OCR fallback."""

import asyncio
import logging

from ..errors import OCRFailure, PageExtractionFailed
from ..models.entities import ExtractionSource, ExtractionUnit, Page
from ..ocr.base import OCREngine

logger = logging.getLogger(__name__)

# Native text shorter than this (after stripping) is treated as a scanned page
MIN_NATIVE_TEXT_LENGTH = 50

# Render magnification used before OCR; larger glyphs recognize better
OCR_RENDER_SCALE = 2.0


class PageTextExtractor:
    """Extract the text of one page with OCR fallback.

    For each page:
    1. Read the native text layer (skipped for image files).
    2. If it is shorter than 50 characters, render the page at 2x and OCR it.
    3. Keep the OCR text only if it is non-empty.

    Errors never escape ``extract_page``; they become failed units.
    """

    def __init__(self, ocr_engine: OCREngine):
        self.ocr_engine = ocr_engine

    async def extract_page(self, page: Page) -> ExtractionUnit:
        """
        Extract text from a single page.

        Args:
            page: The page to process.

        Returns:
            An ExtractionUnit; ``failed`` is set instead of raising.
        """
        try:
            return await self._extract(page)
        except PageExtractionFailed as e:
            logger.warning("%s", e)
            return ExtractionUnit(page_index=page.index, text="", failed=True, error=e.reason)
        except Exception as e:
            logger.warning("Page %d: extraction failed: %s", page.index + 1, e)
            return ExtractionUnit(page_index=page.index, text="", failed=True, error=str(e))

    async def _extract(self, page: Page) -> ExtractionUnit:
        loop = asyncio.get_running_loop()
        handle = page.handle

        text = ""
        if handle.has_text_layer:
            text = await loop.run_in_executor(None, handle.get_text) or ""
            if len(text.strip()) >= MIN_NATIVE_TEXT_LENGTH:
                return ExtractionUnit(page_index=page.index, text=text, source=ExtractionSource.NATIVE)
            logger.debug(
                "Page %d: native text too short (%d chars), falling back to OCR",
                page.index + 1, len(text.strip()),
            )

        raster = await loop.run_in_executor(None, handle.render, OCR_RENDER_SCALE)
        try:
            ocr_text = await self.ocr_engine.recognize(raster)
        except OCRFailure as e:
            if not text.strip():
                raise PageExtractionFailed(page.index, str(e)) from e
            logger.warning("Page %d: %s; keeping native text", page.index + 1, e)
            return ExtractionUnit(page_index=page.index, text=text, source=ExtractionSource.NATIVE)

        if ocr_text:
            logger.info("Page %d: OCR extracted %d characters", page.index + 1, len(ocr_text))
            return ExtractionUnit(page_index=page.index, text=ocr_text, source=ExtractionSource.OCR)

        source = ExtractionSource.NATIVE if handle.has_text_layer else ExtractionSource.OCR
        return ExtractionUnit(page_index=page.index, text=text, source=source)
