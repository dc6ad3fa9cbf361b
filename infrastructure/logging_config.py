"""Structured logging setup.

Every module logs through ``structlog.get_logger(__name__)`` with
key-value context; this module wires the processors once at startup.
"""

import logging
import sys
from typing import Optional

import structlog

from infrastructure.config import get_log_format, get_log_level


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        level: Log level name (defaults to LOG_LEVEL, then INFO)
        json_output: Render JSON lines instead of console output
            (defaults to LOG_FORMAT == "json")
    """
    level_name = (level or get_log_level()).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    if json_output is None:
        json_output = get_log_format() == "json"

    logging.basicConfig(
        level=numeric_level,
        format="%(message)s",
        stream=sys.stdout,
    )
    # pymongo is chatty at DEBUG
    logging.getLogger("pymongo").setLevel(max(numeric_level, logging.INFO))

    renderer = (
        structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )
