"""Shared fixtures and fakes for unit tests.

Everything runs locally: OCR and rendering are replaced by in-memory fakes
unless a test builds a real PDF with PyMuPDF.
"""

import asyncio
import io
import threading
from typing import List, Optional, Sequence, Union

import fitz  # PyMuPDF
import pytest
from PIL import Image

from content_analysis.errors import OCRFailure
from content_analysis.extractors.base import DocumentRenderer, PageHandle
from content_analysis.models.entities import Page, RasterSource
from content_analysis.ocr.base import OCREngine

# Comfortably above the 50-character native text threshold
LONG_TEXT = (
    "Launching our new community garden this weekend.\n"
    "Bring friends, gloves and good vibes to the park."
)


def run(coro):
    return asyncio.run(coro)


class FakeOCREngine(OCREngine):
    """Returns queued results in order; an Exception in the queue is raised."""

    def __init__(self, results: Sequence[Union[str, Exception]] = ()):
        self.results = list(results)
        self.rasters: List[RasterSource] = []
        self.acquired = 0
        self.released = 0

    async def _acquire(self, raster):
        self.acquired += 1
        return object()

    async def _release(self, worker):
        self.released += 1

    async def _recognize_with(self, worker, raster):
        self.rasters.append(raster)
        result = self.results.pop(0) if self.results else ""
        if isinstance(result, Exception):
            raise result
        return result


class FakePageHandle(PageHandle):
    def __init__(self, text: Union[str, Exception] = "", has_text_layer: bool = True):
        self.text = text
        self.has_text_layer = has_text_layer
        self.text_calls = 0
        self.render_scales: List[float] = []

    def get_text(self) -> str:
        self.text_calls += 1
        if isinstance(self.text, Exception):
            raise self.text
        return self.text

    def render(self, scale: float) -> RasterSource:
        self.render_scales.append(scale)
        return RasterSource(data=b"\x89PNG fake", width=int(100 * scale), height=int(100 * scale))


class FakeRenderer(DocumentRenderer):
    """Serves a fixed list of page handles and records open/close."""

    def __init__(self, handles: Sequence[PageHandle], open_error: Optional[Exception] = None):
        self.handles = list(handles)
        self.open_error = open_error
        self.opened = 0
        self.closed = 0
        self.open_threads: List[int] = []

    def _open(self, data, mime_type):
        self.open_threads.append(threading.get_ident())
        if self.open_error is not None:
            raise self.open_error
        self.opened += 1
        return self.handles

    def _close(self, document):
        self.closed += 1

    def _pages(self, document):
        return [Page(index=i, handle=h) for i, h in enumerate(document)]


def make_pdf(page_texts: Sequence[str]) -> bytes:
    """Build a PDF with one page per entry; empty strings give blank pages."""
    doc = fitz.open()
    for text in page_texts:
        page = doc.new_page()  # A4, 595 x 842 points
        if text:
            page.insert_text((72, 72), text, fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def make_png(width: int = 20, height: int = 10) -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (width, height), "white").save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def ocr_failure() -> OCRFailure:
    return OCRFailure("OCR failed: engine crashed")
