"""Structured logging configuration for todo-cli.

Uses structlog for structured, context-rich logging that supports
both human-readable console output and machine-readable JSON format.
Logs go to stderr so they never mix with the task listing on stdout.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.types import Processor

if TYPE_CHECKING:
    from todo_cli.config import TodoSettings


def configure_logging(settings: "TodoSettings | None" = None) -> None:
    """Configure structured logging based on settings.

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

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # prompt_toolkit logs asyncio internals at debug level
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name) if name else structlog.get_logger()


class Loggers:
    """Pre-configured logger instances for todo-cli components."""

    @staticmethod
    def cli() -> structlog.stdlib.BoundLogger:
        """Logger for the command loop."""
        return get_logger("todo_cli.cli")

    @staticmethod
    def manager() -> structlog.stdlib.BoundLogger:
        """Logger for the task manager."""
        return get_logger("todo_cli.manager")

    @staticmethod
    def store() -> structlog.stdlib.BoundLogger:
        """Logger for the persistence layer."""
        return get_logger("todo_cli.store")

    @staticmethod
    def config() -> structlog.stdlib.BoundLogger:
        """Logger for configuration."""
        return get_logger("todo_cli.config")
