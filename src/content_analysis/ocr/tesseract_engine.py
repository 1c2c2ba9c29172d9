"""Tesseract OCR engine backed by pytesseract and Pillow."""

import asyncio
import io
import logging
from typing import Optional

import pytesseract
from PIL import Image
from tenacity import (
    before_sleep_log,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from .base import OCREngine
from ..models.entities import RasterSource

logger = logging.getLogger(__name__)

# Multi-language recognition is not supported
OCR_LANGUAGE = "eng"


def _is_timeout(exc: BaseException) -> bool:
    """pytesseract signals a killed process with a bare RuntimeError."""
    return (
        isinstance(exc, RuntimeError)
        and not isinstance(exc, pytesseract.TesseractError)
        and "timeout" in str(exc).lower()
    )


def _retry_policy(attempts: int):
    # Only timeouts are retried; bad images and missing binaries fail fast.
    return retry(
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
        retry=retry_if_exception(_is_timeout),
        reraise=True,
        before_sleep=before_sleep_log(logger, logging.WARNING),
    )


class TesseractOCREngine(OCREngine):
    """Recognize text with a local Tesseract install.

    Each recognition decodes the raster into its own Pillow image (the
    worker) and closes it when recognition ends.

    Note: pytesseract reads the binary path from a module-level setting, so
    ``tesseract_cmd`` changes it for every engine in the process.
    """

    def __init__(
        self,
        tesseract_cmd: Optional[str] = None,
        timeout_seconds: float = 0,
        retry_attempts: int = 2,
    ):
        """
        Initialize the engine.

        Args:
            tesseract_cmd: Path to the tesseract binary when it is not on PATH.
                Sets ``pytesseract.pytesseract.tesseract_cmd`` process-wide.
            timeout_seconds: Kill tesseract after this many seconds (0 = never).
            retry_attempts: Attempts per recognition when tesseract times out.
        """
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd
        self.timeout_seconds = timeout_seconds
        self.retry_attempts = retry_attempts
        self._image_to_string = _retry_policy(retry_attempts)(self._run_tesseract)
        self._available: Optional[bool] = None

    def is_available(self) -> bool:
        """Check if the Tesseract binary can be found."""
        if self._available is not None:
            return self._available
        try:
            version = pytesseract.get_tesseract_version()
            self._available = True
            logger.info("Tesseract OCR %s is available", version)
        except pytesseract.TesseractNotFoundError:
            self._available = False
            logger.warning("Tesseract OCR is not available; scanned pages and images will yield no text")
        return self._available

    async def _acquire(self, raster: RasterSource) -> Image.Image:
        image = Image.open(io.BytesIO(raster.data))
        image.load()
        logger.debug("OCR worker acquired (%dx%d %s)", image.width, image.height, image.mode)
        return image

    async def _release(self, worker: Image.Image) -> None:
        worker.close()
        logger.debug("OCR worker released")

    async def _recognize_with(self, worker: Image.Image, raster: RasterSource) -> str:
        loop = asyncio.get_running_loop()
        future = loop.run_in_executor(None, self._image_to_string, worker)
        try:
            return await asyncio.shield(future)
        except asyncio.CancelledError:
            # The tesseract subprocess cannot be interrupted; let it finish
            # before the image is closed, then drop its result.
            logger.info("OCR cancelled; waiting for in-flight recognition to finish")
            while not future.done():
                try:
                    await asyncio.wait([future])
                except asyncio.CancelledError:
                    # Repeated cancels must not release the image early.
                    continue
            raise

    def _run_tesseract(self, image: Image.Image) -> str:
        return pytesseract.image_to_string(image, lang=OCR_LANGUAGE, timeout=self.timeout_seconds)
