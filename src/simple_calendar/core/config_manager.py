# File: src/simple_calendar/core/config_manager.py
"""
Centralized configuration management for Simple Calendar.
Loads settings from environment variables (and an optional .env file).
"""

import os
import logging
from pathlib import Path
from typing import List

import pytz
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path.cwd()
    DATA_DIR = Path(os.getenv("CALENDAR_DATA_DIR", BASE_DIR))
    LOGS_DIR = Path(os.getenv("CALENDAR_LOGS_DIR", BASE_DIR / "logs"))

    # Files
    DATA_FILE = DATA_DIR / os.getenv("CALENDAR_DATA_FILE", "events.csv")
    ENV_FILE = BASE_DIR / ".env"

    # Application Settings
    TIMEZONE = os.getenv("CALENDAR_TIMEZONE", "Europe/Amsterdam")
    LOG_LEVEL = os.getenv("CALENDAR_LOG_LEVEL", "INFO").upper()

    # Input / output formats
    DATE_FORMAT = "%Y-%m-%d"
    DATETIME_FORMAT = "%Y-%m-%d %H:%M"
    TIME_FORMAT = "%H:%M"

    @classmethod
    def errors(cls) -> List[str]:
        """Collect every configuration problem."""
        errors = []

        if cls.TIMEZONE not in pytz.all_timezones_set:
            errors.append(f"CALENDAR_TIMEZONE '{cls.TIMEZONE}' is not a known timezone")

        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            errors.append(f"CALENDAR_LOG_LEVEL '{cls.LOG_LEVEL}' is not a logging level")

        if cls.DATA_FILE.exists() and not cls.DATA_FILE.is_file():
            errors.append(f"Data file path is not a file: {cls.DATA_FILE}")

        return errors

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        from simple_calendar.utils.logger import setup_logger
        logger = setup_logger(__name__)

        errors = cls.errors()
        for error in errors:
            logger.error(f"Configuration Error: {error}")

        return not errors
