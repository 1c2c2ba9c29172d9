"""Abstract base class for OCR engines."""

from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from ..errors import OCRFailure
from ..models.entities import RasterSource


class OCREngine(ABC):
    """Interface for optical character recognition backends.

    Every call to ``recognize`` acquires its own worker through
    ``session`` and releases it before returning or raising, whether
    recognition succeeded, came back empty, or failed.
    """

    @abstractmethod
    async def _acquire(self, raster: RasterSource) -> Any:
        """Create the backend worker used for one recognition."""

    @abstractmethod
    async def _release(self, worker: Any) -> None:
        """Tear down a worker created by ``_acquire``."""

    @abstractmethod
    async def _recognize_with(self, worker: Any, raster: RasterSource) -> str:
        """Run recognition on an acquired worker."""

    @asynccontextmanager
    async def session(self, raster: RasterSource) -> AsyncIterator[Any]:
        """Scope a worker to a block; release runs on every exit path."""
        worker = await self._acquire(raster)
        try:
            yield worker
        finally:
            await self._release(worker)

    async def recognize(self, raster: RasterSource) -> str:
        """
        Recognize text in a raster image.

        Args:
            raster: The image to recognize.

        Returns:
            Recognized text (may be empty).

        Raises:
            OCRFailure: If the backend could not recognize the image.
        """
        try:
            async with self.session(raster) as worker:
                return await self._recognize_with(worker, raster)
        except OCRFailure:
            raise
        except Exception as e:
            raise OCRFailure(f"OCR failed: {e}") from e
