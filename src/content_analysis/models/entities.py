"""Data models for the document extraction and engagement analysis pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from ..extractors.base import PageHandle


class ExtractionSource(Enum):
    """Where the text of a page came from."""

    NATIVE = "native"
    OCR = "ocr"


@dataclass(frozen=True)
class RasterSource:
    """A single image handed to an OCR engine (an image file or a rendered page)."""

    data: bytes
    mime_type: str = "image/png"
    width: int = 0
    height: int = 0

    def __repr__(self) -> str:
        return (
            f"RasterSource(mime_type={self.mime_type!r}, size={len(self.data)}, "
            f"width={self.width}, height={self.height})"
        )


@dataclass
class Page:
    """One renderable unit of a document. Only lives for one extraction call."""

    index: int  # 0-indexed
    handle: "PageHandle"


@dataclass
class ExtractionUnit:
    """Result of processing a single page."""

    page_index: int
    text: str
    source: ExtractionSource = ExtractionSource.NATIVE
    failed: bool = False
    error: Optional[str] = None  # Populated when failed

    @property
    def is_ocr(self) -> bool:
        return self.source is ExtractionSource.OCR


@dataclass
class DocumentExtraction:
    """All per-page units of a document plus the aggregate text."""

    mime_type: str
    units: List[ExtractionUnit]
    text: str

    @property
    def page_count(self) -> int:
        return len(self.units)

    @property
    def ocr_pages(self) -> int:
        return sum(1 for u in self.units if u.is_ocr and not u.failed)

    @property
    def failed_pages(self) -> List[int]:
        return [u.page_index for u in self.units if u.failed]


@dataclass(frozen=True)
class ContentMetrics:
    """Raw engagement features counted from a piece of text."""

    word_count: int = 0
    hashtag_count: int = 0
    mention_count: int = 0
    question_count: int = 0
    emoji_count: int = 0

    def to_dict(self) -> dict:
        return {
            "word_count": self.word_count,
            "hashtag_count": self.hashtag_count,
            "mention_count": self.mention_count,
            "question_count": self.question_count,
            "emoji_count": self.emoji_count,
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Engagement score (0-100) and ordered improvement suggestions."""

    score: int
    suggestions: Tuple[str, ...] = ()
    metrics: ContentMetrics = field(default_factory=ContentMetrics)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "score": self.score,
            "suggestions": list(self.suggestions),
            "metrics": self.metrics.to_dict(),
        }


@dataclass
class SourceFile:
    """A file handed to the pipeline by the caller."""

    name: str
    data: bytes
    mime_type: Optional[str] = None  # Sniffed from the bytes when None

    def __repr__(self) -> str:
        return f"SourceFile(name={self.name!r}, mime_type={self.mime_type!r}, size={len(self.data)})"


@dataclass
class DocumentOutcome:
    """Per-file result of a batch run: either extracted text or an error message."""

    name: str
    mime_type: Optional[str]
    size_bytes: int
    text: str = ""
    error: Optional[str] = None
    extraction: Optional[DocumentExtraction] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        data = {
            "name": self.name,
            "mime_type": self.mime_type,
            "size_bytes": self.size_bytes,
            "ok": self.ok,
            "error": self.error,
        }
        if self.extraction is not None:
            data["total_pages"] = self.extraction.page_count
            data["ocr_pages"] = self.extraction.ocr_pages
            data["failed_pages"] = [i + 1 for i in self.extraction.failed_pages]  # 1-indexed
        return data


@dataclass
class BatchResult:
    """Result of processing several files one after another."""

    documents: List[DocumentOutcome]
    text: str
    analysis: Optional[AnalysisResult] = None

    @property
    def succeeded(self) -> List[DocumentOutcome]:
        return [d for d in self.documents if d.ok]

    @property
    def failed(self) -> List[DocumentOutcome]:
        return [d for d in self.documents if not d.ok]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "documents": [d.to_dict() for d in self.documents],
            "text": self.text,
            "analysis": self.analysis.to_dict() if self.analysis else None,
            "summary": {
                "total_files": len(self.documents),
                "succeeded": len(self.succeeded),
                "failed": len(self.failed),
            },
        }
