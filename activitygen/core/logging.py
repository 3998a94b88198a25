"""
Structured logging configuration for activitygen.

structlog loggers hand their event dicts to the standard library, where a
ProcessorFormatter renders them: through a RichHandler with key/value console
rendering on a terminal, as JSON lines on stderr otherwise (CI, piped output).
User-facing create/update lines are printed by the CLI, not logged.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from .config import Config


def _handler(log_level: str) -> tuple[logging.Handler, list[structlog.types.Processor]]:
    """Pick the stderr handler and the processors that finish each record.

    On a terminal the RichHandler prints the time and level columns itself, so
    records only carry the event and its key/values. Elsewhere every record is
    a self-contained JSON line with its own level and timestamp.
    """
    if sys.stderr.isatty():
        handler: logging.Handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            tracebacks_show_locals=log_level == "DEBUG",
        )
        return handler, [structlog.dev.ConsoleRenderer(colors=False)]

    return logging.StreamHandler(sys.stderr), [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.dict_tracebacks,
        structlog.processors.JSONRenderer(),
    ]


def setup_logging(config: Config | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        config: Optional configuration. If None, uses WARNING level.
    """
    log_level = config.log_level if config else "WARNING"
    level = getattr(logging, log_level, logging.WARNING)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]

    handler, final_processors = _handler(log_level)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *final_processors],
        )
    )

    # Configure standard library logging
    logging.basicConfig(level=level, handlers=[handler], force=True)

    # Configure structlog
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured bound logger
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: object) -> None:
    """Bind context variables to all subsequent log entries in this context.

    Args:
        **kwargs: Context key-value pairs to bind
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
