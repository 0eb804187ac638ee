"""Structured logging configuration.

Features:
- JSON-formatted log output for production
- Human-readable format for development
- Pipeline stage bound as context for the duration of each stage
- Diagnostics written to stderr, keeping stdout free for rendered text
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import structlog
from structlog.types import Processor

from supra.core.config import get_settings

_configured = False


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Add service context to all log entries.

    Args:
        logger: The wrapped logger object.
        method_name: The name of the method called on the logger.
        event_dict: The event dictionary to process.

    Returns:
        Updated event dictionary with service context.
    """
    settings = get_settings()
    event_dict["service"] = settings.service_name
    event_dict["environment"] = settings.environment
    return event_dict


def configure_logging(force: bool = False) -> None:
    """Configure structured logging for the preprocessor.

    In development: Human-readable output
    In production: JSON-formatted structured logs

    Args:
        force: Reconfigure even if logging was already configured.
    """
    global _configured
    if _configured and not force:
        return

    settings = get_settings()
    use_json = settings.environment in ("production", "staging")
    level = logging.getLevelName(settings.log_level.upper())

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_service_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if use_json:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    _configured = True


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Optional logger name (module name recommended).

    Returns:
        Configured structlog BoundLogger instance.

    Example:
        ```python
        from supra.core.logging import get_logger

        logger = get_logger(__name__)
        logger.warning("Source not found in library", key="jones2021")
        ```
    """
    return structlog.get_logger(name)


@contextmanager
def log_stage(stage: str, **context: Any) -> Iterator[None]:
    """Bind a pipeline stage (and extra context) to every log entry.

    The binding is removed when the block exits, so context never leaks
    from one stage or one pipeline run into the next.

    Args:
        stage: Name of the pipeline stage.
        **context: Additional key/value pairs to bind.
    """
    with structlog.contextvars.bound_contextvars(stage=stage, **context):
        yield


# Convenience type alias
Logger = structlog.BoundLogger
