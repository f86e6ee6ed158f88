"""ZenTribe scheduling core: conflicts, meeting slots, notifications and iCalendar exchange."""

__version__ = "0.1.0"
