"""
Logging configuration module for structured logging.

This module configures the application's logging system using structlog.
It provides structured logging with JSON formatting for production and
human-readable console output for development.
"""

import logging
from typing import Optional

import structlog


def configure_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Configures the application's logging system.

    This function sets up structlog with:
    1. ISO format timestamps
    2. Log level inclusion and filtering
    3. JSON formatting for production (when LOG_JSON=True)
    4. Console formatting for development
    5. Standard library logger factory
    6. Logger caching for performance

    Args:
        log_level: Minimum level name (e.g. ``"INFO"``).
        json_logs: Render events as JSON lines instead of console output.
    """
    logging.getLogger().setLevel(log_level.upper())

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def mask_email(email: Optional[str]) -> str:
    """Masks an email address for log output (``joh***@example.com``)."""
    if not email or "@" not in email:
        return "unknown"
    local, domain = email.split("@", 1)
    return f"{local[:3]}***@{domain}"


# Create a singleton logger instance for the application
logger = structlog.get_logger()

__all__ = ["configure_logging", "logger", "mask_email"]
