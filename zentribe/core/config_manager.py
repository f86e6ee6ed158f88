# File: zentribe/core/config_manager.py
"""
Centralized configuration management for ZenTribe.
Loads settings from environment variables and config files.
"""

import os
import json
from pathlib import Path
from typing import Dict, Any
from dotenv import load_dotenv
import pytz

from zentribe.models import SchedulingConfig
from zentribe.utils.logger import setup_logger

# Load environment variables
load_dotenv()

logger = setup_logger(__name__)


class Config:
    """Application configuration singleton."""

    # Base directories
    BASE_DIR = Path(__file__).parent.parent.parent  # Go up 3 levels from zentribe/core/

    # Subdirectories
    CONFIG_DIR = BASE_DIR / "config"

    # Files
    SCHEDULING_CONFIG_FILE = CONFIG_DIR / "scheduling.json"

    # Application Settings
    TARGET_TIMEZONE = os.getenv("TIMEZONE", "UTC")
    OWNER_DISPLAY_NAME = "You"

    # Slot generation
    MAX_SLOT_RESULTS = int(os.getenv("MAX_SLOT_RESULTS", "10"))
    BASE_SLOT_SCORE = 100
    CONFLICT_PENALTY = 20
    PREFERRED_PART_BONUS = 10
    EARLY_START_HOUR = 9
    EARLY_PENALTY = 20
    LATE_START_HOUR = 19
    LATE_PENALTY = 15
    SOON_DAYS, SOON_BONUS = 3, 15
    THIS_WEEK_DAYS, THIS_WEEK_BONUS = 7, 10

    # Notifications
    NOTIFY_TICK_SECONDS = int(os.getenv("NOTIFY_TICK_SECONDS", "60"))
    NOTIFY_SWEEP_SECONDS = int(os.getenv("NOTIFY_SWEEP_SECONDS", "3600"))
    REMINDER_LOOKAHEAD_MINUTES = 10
    TODO_LOOKAHEAD_MINUTES = 30
    EVENT_LOOKAHEAD_MINUTES = 10

    # Interchange format
    ICS_PRODUCT_ID = "-//MyZenTribe//Calendar//EN"
    ICS_UID_DOMAIN = "myzentribe.com"
    IMPORTED_EVENT_TITLE = "Imported Event"
    IMPORTED_EVENT_MINUTES = 60

    @classmethod
    def timezone(cls):
        return pytz.timezone(cls.TARGET_TIMEZONE)

    @classmethod
    def load_scheduling_config(cls) -> SchedulingConfig:
        """Load scheduling policy, falling back to defaults when no file exists."""
        data: Dict[str, Any] = {
            'timezone': cls.TARGET_TIMEZONE,
            'max_slot_results': cls.MAX_SLOT_RESULTS,
            'owner_name': cls.OWNER_DISPLAY_NAME,
        }
        if cls.SCHEDULING_CONFIG_FILE.exists():
            with open(cls.SCHEDULING_CONFIG_FILE, 'r', encoding='utf-8') as f:
                data.update(json.load(f))
            logger.debug(f"Loaded scheduling overrides from {cls.SCHEDULING_CONFIG_FILE}")
        return SchedulingConfig.from_dict(data)

    @classmethod
    def validate(cls) -> bool:
        """Validate that all required configuration is present."""
        errors = []

        try:
            pytz.timezone(cls.TARGET_TIMEZONE)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Unknown TIMEZONE '{cls.TARGET_TIMEZONE}'")

        if cls.MAX_SLOT_RESULTS <= 0:
            errors.append("MAX_SLOT_RESULTS must be positive")

        if cls.NOTIFY_TICK_SECONDS <= 0:
            errors.append("NOTIFY_TICK_SECONDS must be positive")

        if cls.NOTIFY_SWEEP_SECONDS < cls.NOTIFY_TICK_SECONDS:
            errors.append("NOTIFY_SWEEP_SECONDS must not be shorter than NOTIFY_TICK_SECONDS")

        if cls.SCHEDULING_CONFIG_FILE.exists():
            try:
                cls.load_scheduling_config()
            except (ValueError, KeyError, json.JSONDecodeError) as e:
                errors.append(f"Invalid {cls.SCHEDULING_CONFIG_FILE.name}: {e}")

        if errors:
            for error in errors:
                logger.error(f"Configuration Error: {error}")
            return False

        return True
