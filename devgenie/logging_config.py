"""Structured logging configuration.

Outputs either JSON (production log shipping) or console format (development)
through structlog. Called once from the application lifespan.

Usage:
    from devgenie.logging_config import setup_logging
    import structlog

    setup_logging(service_name="devgenie")
    logger = structlog.get_logger()
    logger.info("event_name", key1=value1, key2=value2)
"""

import logging
import os
import sys
from typing import Literal

import structlog
from structlog.types import Processor

# Chatty transport loggers that would otherwise log every provider request at INFO
_QUIET_LOGGERS = ("httpx", "httpcore")


def setup_logging(
    service_name: str | None = None,
    log_format: Literal["json", "console"] | None = None,
    log_level: str | None = None,
) -> None:
    """Configure structured logging with structlog.

    Args:
        service_name: Name bound to every event.
                     Falls back to SERVICE_NAME env var or "devgenie".
        log_format: "json" for production, "console" for dev.
                   Falls back to LOG_FORMAT env var or "console".
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
                  Falls back to LOG_LEVEL env var or "INFO".
    """
    service_name = service_name or os.getenv("SERVICE_NAME", "devgenie")
    log_format = log_format or os.getenv("LOG_FORMAT", "console")
    log_level = log_level or os.getenv("LOG_LEVEL", "INFO")

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer(sort_keys=False))
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    structlog.get_logger().info(
        "logging_initialized",
        log_format=log_format,
        log_level=log_level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    return structlog.get_logger(name)
