"""Logging configuration using structlog.

stdout carries the NDJSON records, so every diagnostic goes to stderr.
"""

import logging
import sys
from typing import Any

import structlog

HANDLER_NAME = "gitstream-stderr"


class StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is at emit time.

    Redirections made after configuration (e.g., by a test runner) are
    honored instead of writing to a stale stream.
    """

    def __init__(self) -> None:
        super().__init__()
        self.set_name(HANDLER_NAME)
        self.setFormatter(logging.Formatter("%(message)s"))

    @property  # type: ignore[override]
    def stream(self) -> Any:
        return sys.stderr

    @stream.setter
    def stream(self, value: Any) -> None:
        pass


def _install_handler(level: int) -> logging.Handler:
    root = logging.getLogger()
    handler = next(
        (h for h in root.handlers if h.get_name() == HANDLER_NAME), None
    )
    if handler is None:
        handler = StderrHandler()
        root.addHandler(handler)
    handler.setLevel(level)
    root.setLevel(level)
    return handler


def configure_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Configure structlog for a gitstream run.

    Safe to call repeatedly: the stderr handler is installed once and only
    its level and the renderer change on later calls.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Output format ("json" for JSON lines, "console" for human-readable)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    _install_handler(numeric_level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(sort_keys=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
