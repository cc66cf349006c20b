"""Structured logging helpers.

Log events go to stderr so they never interleave with the console output
written to stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Literal, TextIO

import structlog

LogFormat = Literal["json", "console"]


def _renderer(log_format: LogFormat):
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def configure_logging(
    level: int = logging.INFO,
    *,
    log_format: LogFormat = "json",
    stream: TextIO | None = None,
) -> None:
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=True,
    )


def level_from_name(name: str) -> int:
    """Translate a configured level name (``"debug"``, ``"WARNING"``) to a number."""

    value = logging.getLevelName(name.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {name!r}")
    return value


logger = structlog.get_logger()

__all__ = ["LogFormat", "configure_logging", "level_from_name", "logger"]
