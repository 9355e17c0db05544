"""
Logging Configuration

Structured logging setup using structlog.

Log Output:
===========
Development:
    2025-01-15T10:30:00Z [info     ] Rating stored    [mediashelf] user_id=3 work_id=12 score=4

Production (JSON):
    {"timestamp": "2025-01-15T10:30:00Z", "level": "info", "event": "Rating stored", "user_id": 3}

Usage:
======
    from mediashelf.shared.core.logging import logger, get_logger, log_context

    logger.info("Shelf created", shelf_id=shelf.id, user_id=user_id)

    storage_logger = get_logger("storage")
    storage_logger.debug("Record inserted", model="Rating", record_id=7)

    # Bind request context for every log line until cleared
    log_context(request_id=request_id)
"""

import logging
import sys
from typing import Any

import structlog
from structlog.typing import Processor

from mediashelf.config.settings import settings


def setup_logging() -> None:
    """
    Configure structured logging for the application.

    Development gets colored console output, every other environment
    gets one JSON object per line.

    Called automatically when this module is imported.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.is_development:
        processors: list[Processor] = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=True),
        ]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name, defaults to the root logger if not specified

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def log_context(**kwargs: Any) -> None:
    """
    Bind key-value pairs to every subsequent log call in this context.

    Args:
        **kwargs: Key-value pairs to add to log context

    Example:
        log_context(request_id="abc-123")
        logger.info("Follow created")  # Includes request_id
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """
    Clear all bound context variables.

    The request logging middleware calls this when a request finishes so
    context does not leak into the next request.
    """
    structlog.contextvars.clear_contextvars()


setup_logging()

logger = get_logger("mediashelf")
