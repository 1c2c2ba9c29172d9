"""Exception hierarchy for extraction and analysis.

Only ``FileTypeInvalid``, ``FileTooLarge``, ``DocumentProcessingFailed`` and
``NoTextExtracted`` ever reach callers of the orchestrator. Page and OCR
errors are recovered inside the extractor.
"""


class ContentAnalysisError(Exception):
    """Base class for all errors raised by this package."""


class FileTypeInvalid(ContentAnalysisError):
    """Input is neither a PDF nor an image."""

    def __init__(self, mime_type):
        self.mime_type = mime_type
        super().__init__(
            f"Unsupported file type: {mime_type or 'unknown'}. "
            "Please upload PDF or image files only."
        )


class FileTooLarge(ContentAnalysisError):
    """Input exceeds the configured maximum size."""

    def __init__(self, size_bytes: int, max_bytes: int):
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        super().__init__(
            f"File size ({size_bytes} bytes) exceeds maximum allowed size of {max_bytes} bytes."
        )


class DocumentProcessingFailed(ContentAnalysisError):
    """The document could not be opened or enumerated at all."""


class PageExtractionFailed(ContentAnalysisError):
    """A single page could not be extracted. Recovered by the orchestrator."""

    def __init__(self, page_index: int, reason: str):
        self.page_index = page_index
        self.reason = reason
        super().__init__(f"Page {page_index + 1}: {reason}")


class OCRFailure(ContentAnalysisError):
    """The OCR engine could not recognize a raster."""


class NoTextExtracted(ContentAnalysisError):
    """Every page was processed but no usable text came out."""

    PDF_MESSAGE = (
        "Could not extract text from this document. "
        "Please ensure the PDF is not secured or damaged."
    )
    IMAGE_MESSAGE = "Failed to extract text from image."

    def __init__(self, mime_type: str = "application/pdf"):
        self.mime_type = mime_type
        message = self.IMAGE_MESSAGE if mime_type.startswith("image/") else self.PDF_MESSAGE
        super().__init__(message)


class AnalysisError(ContentAnalysisError):
    """Text that the analyzer cannot handle. Indicates a bug, never expected."""
