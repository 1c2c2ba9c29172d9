"""Logging setup: stdlib loggers rendered through structlog."""

import logging
import sys

import structlog

_SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def setup_logging(log_level: str = "INFO", log_format: str = "console") -> None:
    """Configure structlog and route stdlib ``logging`` through it.

    Args:
        log_level: Root log level name (``DEBUG``, ``INFO``, ...).
        log_format: ``json`` for machine-readable lines, anything else for
            the coloured console renderer.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format == "json":
        final_processors = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        final_processors = [structlog.dev.ConsoleRenderer()]

    structlog.configure(
        processors=_SHARED_PROCESSORS + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final_processors],
    )

    # Logs go to stderr so CLI output on stdout stays parseable
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    # Pillow is chatty at DEBUG
    logging.getLogger("PIL").setLevel(max(level, logging.INFO))
