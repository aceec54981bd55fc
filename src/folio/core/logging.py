"""Logging configuration for Folio."""

import logging
import sys
from typing import Optional

import structlog

from folio.core.config import LoggingConfig


def _stderr_logger_factory(*args) -> structlog.PrintLogger:
    # sys.stderr is looked up on every call
    return structlog.PrintLogger(file=sys.stderr)


def configure_logging(config: Optional[LoggingConfig] = None) -> None:
    """Configure structlog for Folio.

    Args:
        config: Logging configuration, defaults apply when omitted
    """
    config = config or LoggingConfig()
    level = logging.getLevelName(config.level)

    if config.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger instance."""
    return structlog.get_logger(name)
