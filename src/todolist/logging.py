"""Structured logging configuration for the todo CLI.

Uses structlog for the operator-facing diagnostic stream (stderr),
kept separate from the user-facing command output on stdout. Supports
both human-readable console output and machine-readable JSON.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from todolist.config import TodoSettings


def configure_logging(settings: "TodoSettings | None" = None) -> None:
    """Point structlog at stderr with the configured level and renderer.

    The stdlib root logger is not touched.

    Args:
        settings: Application settings. If None, uses defaults.
    """
    log_level = logging.WARNING
    log_format = "console"

    if settings is not None:
        log_level = getattr(logging, settings.log_level.upper(), logging.WARNING)
        log_format = settings.log_format

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(
                colors=sys.stderr.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            ),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log calls.

    Example:
        bind_context(command="add")
        logger.info("task_added")  # Will include command="add"
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()


class Loggers:
    """Pre-configured logger instances for todo components.

    Each call returns a fresh lazy proxy, so components that grab their
    logger at construction time pick up the configuration active then.
    """

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        """Logger for CLI components."""
        return get_logger("todolist.cli")

    @staticmethod
    def store() -> structlog.stdlib.BoundLogger:
        """Logger for the record store."""
        return get_logger("todolist.store")

    @staticmethod
    def tasks() -> structlog.stdlib.BoundLogger:
        """Logger for task operations."""
        return get_logger("todolist.tasks")
