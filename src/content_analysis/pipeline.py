"""Main content analysis pipeline: extract text from files, then score it."""

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .analysis.analyzer import ContentAnalyzer
from .errors import ContentAnalysisError
from .extractors.orchestrator import PAGE_SEPARATOR, DocumentExtractionOrchestrator
from .files import detect_mime, validate_mime, validate_size
from .models.entities import AnalysisResult, BatchResult, DocumentOutcome, SourceFile

logger = logging.getLogger(__name__)


class ContentPipeline:
    """Orchestrates extract -> analyze for one or more uploaded files.

    Files are processed one after another. A file that is rejected or
    yields no text gets an error message on its outcome and does not stop
    the rest of the batch.
    """

    def __init__(
        self,
        orchestrator: DocumentExtractionOrchestrator,
        analyzer: Optional[ContentAnalyzer] = None,
        max_file_size_bytes: int = 0,
    ):
        self.orchestrator = orchestrator
        self.analyzer = analyzer or ContentAnalyzer()
        self.max_file_size_bytes = max_file_size_bytes

    def analyze(self, text: str) -> AnalysisResult:
        """Score already-extracted text."""
        return self.analyzer.analyze(text)

    async def process_file(
        self,
        data: bytes,
        mime_type: Optional[str] = None,
        name: str = "",
    ) -> DocumentOutcome:
        """
        Extract text from a single file.

        Args:
            data: Raw file bytes.
            mime_type: Declared MIME type; sniffed from the bytes when None.
            name: Display name used in logs and the outcome.

        Returns:
            DocumentOutcome with either ``text`` or a human-readable ``error``.
        """
        name = name or "<upload>"
        outcome = DocumentOutcome(name=name, mime_type=mime_type, size_bytes=len(data))
        try:
            if outcome.mime_type is None:
                outcome.mime_type = detect_mime(data, filename=name)
            outcome.mime_type = validate_mime(outcome.mime_type)
            validate_size(len(data), self.max_file_size_bytes)

            logger.info("Extracting text from %s...", name)
            start_time = time.time()
            extraction = await self.orchestrator.extract_document(data, outcome.mime_type)
            logger.info(
                "Extracted %d characters from %s (%d pages, %d OCR) in %.2fs",
                len(extraction.text), name, extraction.page_count,
                extraction.ocr_pages, time.time() - start_time,
            )
        except ContentAnalysisError as e:
            logger.warning("Could not process %s: %s", name, e)
            outcome.error = str(e)
            return outcome

        outcome.extraction = extraction
        outcome.text = extraction.text
        return outcome

    async def process_files(self, files: Iterable[SourceFile]) -> BatchResult:
        """
        Extract every file in turn and analyze the combined text.

        Returns:
            BatchResult; ``analysis`` is None when no file produced text.
        """
        outcomes: List[DocumentOutcome] = []
        for f in files:
            outcomes.append(await self.process_file(f.data, f.mime_type, f.name))
        return self._combine(outcomes)

    async def process_paths(self, paths: Iterable[Union[str, Path]]) -> BatchResult:
        """Read files from disk one at a time and process them like ``process_files``.

        A path that cannot be read is reported on its outcome and the
        remaining paths are still processed.
        """
        outcomes: List[DocumentOutcome] = []
        for p in paths:
            path = Path(p)
            try:
                data = path.read_bytes()
            except OSError as e:
                logger.warning("Could not read %s: %s", path, e)
                outcomes.append(DocumentOutcome(
                    name=path.name,
                    mime_type=None,
                    size_bytes=0,
                    error=f"Could not read file: {e.strerror or e}",
                ))
                continue
            outcomes.append(await self.process_file(data, name=path.name))
        return self._combine(outcomes)

    def _combine(self, outcomes: List[DocumentOutcome]) -> BatchResult:
        succeeded = [o for o in outcomes if o.ok]
        text = "".join(o.text + PAGE_SEPARATOR for o in succeeded)
        logger.info("Processed %d files (%d failed)", len(outcomes), len(outcomes) - len(succeeded))

        analysis = None
        if succeeded:
            analysis = self.analyze(text)
            logger.info("Engagement score: %d (%d suggestions)", analysis.score, len(analysis.suggestions))

        return BatchResult(documents=outcomes, text=text, analysis=analysis)
