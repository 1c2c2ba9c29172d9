"""Document-level extraction: page iteration, aggregation and failure policy."""

import asyncio
import logging
from contextlib import ExitStack
from typing import List, Optional

from .base import DocumentRenderer
from .page_extractor import PageTextExtractor
from .renderers import ImageRenderer, PDFRenderer
from ..errors import DocumentProcessingFailed, NoTextExtracted
from ..files import detect_mime, is_image, validate_mime
from ..models.entities import DocumentExtraction, ExtractionUnit

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n\n"


class DocumentExtractionOrchestrator:
    """Turn PDF or image bytes into aggregate text.

    Pages are processed one at a time in document order. A page that
    fails is logged and skipped; the document only fails as a whole when
    no page produced any text.
    """

    def __init__(
        self,
        page_extractor: PageTextExtractor,
        pdf_renderer: Optional[DocumentRenderer] = None,
        image_renderer: Optional[DocumentRenderer] = None,
    ):
        self.page_extractor = page_extractor
        self.pdf_renderer = pdf_renderer or PDFRenderer()
        self.image_renderer = image_renderer or ImageRenderer()

    async def extract(self, data: bytes, mime_type: Optional[str] = None) -> str:
        """
        Extract the aggregate text of a document.

        Args:
            data: Raw file bytes.
            mime_type: ``application/pdf`` or any ``image/*`` type. Sniffed
                from the bytes when omitted.

        Returns:
            Non-failed page texts in page order, each followed by a blank line.

        Raises:
            FileTypeInvalid: If the input is neither a PDF nor an image.
            DocumentProcessingFailed: If the document cannot be opened.
            NoTextExtracted: If no page yielded any text.
        """
        extraction = await self.extract_document(data, mime_type)
        return extraction.text

    async def extract_document(self, data: bytes, mime_type: Optional[str] = None) -> DocumentExtraction:
        """Same as ``extract`` but also returns the per-page units."""
        if mime_type is None:
            mime_type = detect_mime(data)
        mime_type = validate_mime(mime_type)
        renderer = self.image_renderer if is_image(mime_type) else self.pdf_renderer

        loop = asyncio.get_running_loop()
        units: List[ExtractionUnit] = []
        with ExitStack() as stack:
            try:
                pages = await loop.run_in_executor(
                    None, stack.enter_context, renderer.open(data, mime_type)
                )
            except Exception as e:
                logger.error("Error opening document (%s): %s", mime_type, e)
                kind = "image" if is_image(mime_type) else "PDF"
                raise DocumentProcessingFailed(
                    f"Failed to process the {kind}. Please try again with a different file."
                ) from e

            logger.info("Extracting text from %d page(s) (%s)", len(pages), mime_type)
            for page in pages:
                try:
                    unit = await self.page_extractor.extract_page(page)
                except Exception as e:
                    unit = ExtractionUnit(page_index=page.index, text="", failed=True, error=str(e))
                if unit.failed:
                    logger.error("Error processing page %d: %s", page.index + 1, unit.error)
                units.append(unit)

        failed = [u for u in units if u.failed]

        text = "".join(u.text + PAGE_SEPARATOR for u in units if not u.failed)
        if not text.strip():
            logger.warning("No text could be extracted (%d page(s), %d failed)", len(units), len(failed))
            raise NoTextExtracted(mime_type)

        ocr_pages = sum(1 for u in units if u.is_ocr and not u.failed)
        if ocr_pages:
            logger.info("%d page(s) processed with OCR", ocr_pages)

        return DocumentExtraction(mime_type=mime_type, units=units, text=text)
