"""
Structured logging for slotwise, built on structlog over the stdlib.

Output goes to stderr so the CLI can keep stdout for its JSON results.
Set SLOTWISE_LOG_FORMAT=json for one JSON object per line; otherwise logs
are rendered for a console.

Usage:
    from slotwise.logging_config import get_logger, setup_logging

    setup_logging("DEBUG")
    logger = get_logger(__name__)
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

import structlog


LOG_LEVEL_ENV = "SLOTWISE_LOG_LEVEL"
LOG_FORMAT_ENV = "SLOTWISE_LOG_FORMAT"

# Chatty at INFO and below while resolving relative dates
_NOISY_LOGGERS = ("dateparser", "tzlocal")


def _renderer(json_output: bool, stream: TextIO) -> structlog.types.Processor:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def setup_logging(
    level: str | None = None,
    json_output: bool | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog and the root stdlib logger.

    Args:
        level: Log level name (default: $SLOTWISE_LOG_LEVEL or INFO)
        json_output: Render JSON lines (default: $SLOTWISE_LOG_FORMAT == "json")
        stream: Where to write (default: stderr)
    """
    level = level or os.environ.get(LOG_LEVEL_ENV, "INFO")
    if json_output is None:
        json_output = os.environ.get(LOG_FORMAT_ENV, "").lower() == "json"
    stream = stream or sys.stderr

    timestamper = structlog.processors.TimeStamper(fmt="iso")
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        timestamper,
    ]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            *pre_chain,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain covers records from plain logging.getLogger() callers
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(json_output, stream),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


__all__ = ["LOG_FORMAT_ENV", "LOG_LEVEL_ENV", "get_logger", "setup_logging"]
