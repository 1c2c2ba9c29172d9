"""Abstract interfaces for the document rendering capability."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator, List

from ..models.entities import Page, RasterSource


class PageHandle(ABC):
    """A renderer's view of one page: its text layer and its pixels."""

    #: False for raster inputs, which never have a native text layer.
    has_text_layer: bool = True

    @abstractmethod
    def get_text(self) -> str:
        """Return the page's native text layer (empty if there is none)."""

    @abstractmethod
    def render(self, scale: float) -> RasterSource:
        """Rasterize the page at ``scale`` times its natural size."""


class DocumentRenderer(ABC):
    """Opens raw file bytes as an ordered sequence of pages.

    Pages are only valid inside the ``open`` block.
    """

    @abstractmethod
    def _open(self, data: bytes, mime_type: str):
        """Open the underlying document object."""

    @abstractmethod
    def _close(self, document) -> None:
        """Release the document object returned by ``_open``."""

    @abstractmethod
    def _pages(self, document) -> List[Page]:
        """Enumerate the document's pages in order."""

    @contextmanager
    def open(self, data: bytes, mime_type: str) -> Iterator[List[Page]]:
        """
        Open a document and yield its pages.

        Args:
            data: Raw file bytes.
            mime_type: Validated MIME type of ``data``.

        Yields:
            Pages in document order.
        """
        document = self._open(data, mime_type)
        try:
            yield self._pages(document)
        finally:
            self._close(document)
