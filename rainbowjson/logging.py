"""
Public API for logging functionality.

Logging auto-configures on first use from environment variables.

Quick Start:
    >>> from rainbowjson.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Hello world")

Environment Variables:
    - LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
    - LOG_USE_RICH: Enable rich formatting (true/false)
    - LOG_FILE_PATH: Optional log file path
"""

from rainbowjson._core.logging import (
    RichLogger,
    configure_logging,
    get_logger,
    is_logging_configured,
    log_summary,
    logger,
)

__all__ = [
    'configure_logging',
    'get_logger',
    'is_logging_configured',
    'log_summary',
    'logger',
    'RichLogger',
]
