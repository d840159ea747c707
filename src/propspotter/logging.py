"""Structured logging setup using structlog."""

import logging
import sys

import structlog
from structlog.typing import FilteringBoundLogger, Processor


def configure_logging(*, json_output: bool = False, level: int = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        json_output: Render events as JSON lines instead of the dev console format.
        level: Minimum stdlib log level to emit.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Get a structlog logger bound to a module name."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
