"""Command line entry point: analyze PDFs and images for engagement potential.

Usage:
    content-analyzer post.pdf screenshot.png [--json] [--show-text]
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

from .config import get_settings
from .factory import build_pipeline
from .files import format_file_size
from .logging_config import setup_logging
from .models.entities import BatchResult

logger = logging.getLogger(__name__)


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="content-analyzer",
        description="Extract text from PDF/image files and score it for social media engagement.",
    )
    parser.add_argument("files", nargs="+", help="PDF or image files to analyze")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--show-text", action="store_true", help="Print the extracted text")
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    return parser.parse_args(argv)


def _print_report(result: BatchResult, show_text: bool) -> None:
    print("Uploaded Files:")
    for doc in result.documents:
        size = format_file_size(doc.size_bytes)
        if doc.ok:
            pages = doc.extraction.page_count if doc.extraction else 0
            print(f"  [ok]   {doc.name} ({size}, {pages} page(s))")
        else:
            print(f"  [fail] {doc.name} ({size}): {doc.error}")

    if show_text and result.text:
        print("\nExtracted Text:")
        print(result.text)

    if result.analysis is None:
        print("\nNo text could be extracted from the uploaded files.")
        return

    print(f"\nEngagement Score: {result.analysis.score}%")
    if result.analysis.suggestions:
        print("Improvement Suggestions:")
        for s in result.analysis.suggestions:
            print(f"  - {s}")


def main(argv=None) -> int:
    args = _parse_args(argv)
    settings = get_settings()
    setup_logging(log_level=args.log_level or settings.log_level, log_format=settings.log_format)

    missing = [f for f in args.files if not Path(f).is_file()]
    if missing:
        for f in missing:
            print(f"File not found: {f}", file=sys.stderr)
        return 2

    pipeline = build_pipeline(settings)
    result = asyncio.run(pipeline.process_paths(args.files))

    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        _print_report(result, args.show_text)

    return 0 if result.analysis is not None else 1


if __name__ == "__main__":
    sys.exit(main())
