"""Logging configuration for the inventory service."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from app.core.config import settings


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Setup a logger with a stdout handler and an optional rotating file handler.

    Args:
        name: Logger name
        log_file: Optional log file path (defaults to LOG_FILE)
        level: Optional log level (overrides LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    log_level = level or settings.LOG_LEVEL
    logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(settings.LOG_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or settings.LOG_FILE
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=5_000_000,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_api_logger() -> logging.Logger:
    """Get logger for HTTP request handling."""
    return setup_logger("inventory.api")


def get_storage_logger() -> logging.Logger:
    """Get logger for storage backends."""
    return setup_logger("inventory.storage")


def get_inventory_logger() -> logging.Logger:
    """Get logger for stock movements and catalog changes."""
    return setup_logger("inventory.domain")
