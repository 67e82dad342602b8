"""
Structured logging setup using structlog.

The library only emits through get_logger(); applications that want the
JSON output call setup_logging() once at startup.
"""

import logging
import os
import sys
from typing import Optional

import structlog


def setup_logging(level: Optional[str] = None):
    """
    Configure structlog for JSON-formatted logging.

    Log levels used by this library:
    - DEBUG: Every completed request/response exchange
    - INFO: Sim mode actions
    - WARNING: Transport failures and non-2xx responses

    Args:
        level: Log level name. Defaults to the LOG_LEVEL environment
               variable, or WARNING when unset.

    Usage:
        from radiothermostat.utils.logging import setup_logging
        setup_logging()
    """
    log_level = (level or os.getenv("LOG_LEVEL", "WARNING")).upper()
    numeric_level = getattr(logging, log_level, logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=numeric_level,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Optional logger name (e.g., module name)

    Returns:
        Configured structlog logger

    Example:
        log = get_logger(__name__)
        log.warning("request_failed", url="http://10.0.0.5/tstat", status_code=500)
    """
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
