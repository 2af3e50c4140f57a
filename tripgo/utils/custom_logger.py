### Description ###
# TripGo - Multi-Tenant Travel Booking API
# - Custom Logger Setup -
# Author: TripGo Team
# Date: 10/19/2026
# Python: 3.11
####################

# Standard Imports
import logging
from datetime import datetime
from pathlib import Path


class CustomFormatter(logging.Formatter):
    """Formatter producing `HH:MM:SS AM/PM - name - LEVEL: message` lines"""

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime("%I:%M:%S %p")

        formatted_msg = f"{timestamp} - {record.name} - {record.levelname}: {record.getMessage()}"

        if record.exc_info:
            formatted_msg += "\n" + self.formatException(record.exc_info)

        return formatted_msg


def setup_logger(
    name: str, level: int | str = logging.INFO, log_to_file: bool = True, log_to_console: bool = True
) -> logging.Logger:
    """
    Set up a custom logger for TripGo

    Args:
        name: Logger name (typically __name__)
        level: Logging level or level name (default: INFO)
        log_to_file: Whether to log to logs/tripgo_YYYY-MM-DD.log (default: True)
        log_to_console: Whether to log to console (default: True)

    Returns:
        Configured logger instance

    Example:
        logger = setup_logger(__name__)
        logger.info("Tenant resolved")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers if logger already exists
    if logger.handlers:
        return logger

    formatter = CustomFormatter()

    if log_to_file:
        logs_dir = Path("logs")
        logs_dir.mkdir(exist_ok=True)

        log_filename = f"tripgo_{datetime.now().strftime('%Y-%m-%d')}.log"
        file_handler = logging.FileHandler(logs_dir / log_filename, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get an existing logger or create a new one with default settings"""
    return setup_logger(name)
