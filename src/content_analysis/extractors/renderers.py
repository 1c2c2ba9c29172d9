"""Document renderers: PyMuPDF for PDFs, pass-through for image files."""

import logging
from typing import List

import fitz  # PyMuPDF

from .base import DocumentRenderer, PageHandle
from ..models.entities import Page, RasterSource

logger = logging.getLogger(__name__)


class PDFPageHandle(PageHandle):
    """A single PyMuPDF page."""

    def __init__(self, page):
        self._page = page

    def get_text(self) -> str:
        return self._page.get_text()

    def render(self, scale: float) -> RasterSource:
        pix = self._page.get_pixmap(matrix=fitz.Matrix(scale, scale))
        return RasterSource(
            data=pix.tobytes("png"),
            mime_type="image/png",
            width=pix.width,
            height=pix.height,
        )


class PDFRenderer(DocumentRenderer):
    """Open PDF bytes with PyMuPDF.

    Born-digital pages expose their text layer through ``get_text``;
    scanned pages come back empty and are rendered for OCR instead.
    """

    def _open(self, data: bytes, mime_type: str):
        doc = fitz.open(stream=data, filetype="pdf")
        if doc.needs_pass:
            logger.warning("PDF is password protected; text extraction will likely fail")
        return doc

    def _close(self, document) -> None:
        document.close()

    def _pages(self, document) -> List[Page]:
        return [Page(index=i, handle=PDFPageHandle(document[i])) for i in range(len(document))]


class ImagePageHandle(PageHandle):
    """An image file treated as the only page of a document."""

    has_text_layer = False

    def __init__(self, data: bytes, mime_type: str):
        self._raster = RasterSource(data=data, mime_type=mime_type)

    def get_text(self) -> str:
        return ""

    def render(self, scale: float) -> RasterSource:
        # Image files are recognized at their own resolution
        return self._raster


class ImageRenderer(DocumentRenderer):
    """Wrap raw image bytes as a one-page document."""

    def _open(self, data: bytes, mime_type: str):
        return ImagePageHandle(data, mime_type)

    def _close(self, document) -> None:
        pass

    def _pages(self, document) -> List[Page]:
        return [Page(index=0, handle=document)]
