"""File type validation and formatting helpers for incoming documents."""

import logging
import mimetypes
from typing import Optional

import filetype

from .errors import FileTooLarge, FileTypeInvalid

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


def is_pdf(mime_type: Optional[str]) -> bool:
    return mime_type == PDF_MIME_TYPE


def is_image(mime_type: Optional[str]) -> bool:
    return bool(mime_type) and mime_type.startswith("image/")


def is_supported_mime(mime_type: Optional[str]) -> bool:
    """Only PDFs and images (any ``image/*`` subtype) are accepted."""
    return is_pdf(mime_type) or is_image(mime_type)


def validate_mime(mime_type: Optional[str]) -> str:
    """
    Normalize and validate a MIME type.

    Raises:
        FileTypeInvalid: If it is neither a PDF nor an image.
    """
    normalized = (mime_type or "").split(";")[0].strip().lower()
    if not is_supported_mime(normalized):
        raise FileTypeInvalid(mime_type)
    return normalized


def detect_mime(data: bytes, filename: Optional[str] = None) -> Optional[str]:
    """
    Work out a file's MIME type from its magic bytes.

    Falls back to the filename extension when the content is not
    recognized. Returns None if neither gives an answer.
    """
    kind = filetype.guess(data)
    if kind is not None:
        return kind.mime
    if filename:
        guessed, _ = mimetypes.guess_type(filename)
        if guessed:
            logger.debug("MIME type of %s guessed from extension: %s", filename, guessed)
            return guessed
    return None


def validate_size(size_bytes: int, max_bytes: int) -> None:
    """Raise FileTooLarge if ``size_bytes`` exceeds ``max_bytes`` (0 disables the check)."""
    if max_bytes and size_bytes > max_bytes:
        raise FileTooLarge(size_bytes, max_bytes)


def format_file_size(size_bytes: int) -> str:
    """Human-readable size: ``0 Bytes``, ``512 Bytes``, ``1.5 KB``, ``2.25 MB``."""
    if size_bytes <= 0:
        return "0 Bytes"
    units = ["Bytes", "KB", "MB", "GB"]
    value = float(size_bytes)
    i = 0
    while value >= 1024 and i < len(units) - 1:
        value /= 1024
        i += 1
    return f"{round(value, 2):g} {units[i]}"
