# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data and mocks for all tests.
"""

import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path
from unittest.mock import Mock

import pytest
import pytz

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Keep test runs from writing into the project's logs/ directory
os.environ.setdefault("ZENTRIBE_LOG_DIR", str(Path(tempfile.gettempdir()) / "zentribe-test-logs"))

from zentribe.core.config_manager import Config
from zentribe.models import (
    CalendarItem, ItemKind, Participant, SchedulingConfig, TimeInterval
)
from zentribe.processors.slot_processor import SlotProcessor


def at(day: int, hour: int, minute: int = 0) -> datetime:
    """UTC instant in the week of Monday 2026-10-19."""
    return pytz.utc.localize(datetime(2026, 10, day, hour, minute))


# ==================== Configuration Fixtures ====================

@pytest.fixture(autouse=True)
def utc_config(monkeypatch):
    """Pin the configured timezone so floating times are deterministic."""
    monkeypatch.setattr(Config, "TARGET_TIMEZONE", "UTC")
    monkeypatch.setattr(Config, "SCHEDULING_CONFIG_FILE", PROJECT_ROOT / "config" / "missing.json")


@pytest.fixture
def scheduling_config():
    """Default scheduling policy in UTC."""
    return SchedulingConfig(timezone="UTC")


@pytest.fixture
def monday_morning():
    """Evaluation time: Monday 2026-10-19 07:00 UTC."""
    return at(19, 7)


@pytest.fixture
def slot_processor(scheduling_config, monday_morning):
    """Slot processor with a fixed clock."""
    return SlotProcessor(scheduling_config, now_provider=lambda: monday_morning)


# ==================== Participant Fixtures ====================

@pytest.fixture
def alice():
    return Participant(id="u-alice", display_name="Alice", busy_intervals=[])


@pytest.fixture
def bob():
    """Bob is in a meeting Monday 10:00-11:00."""
    return Participant(
        id="u-bob",
        display_name="Bob",
        busy_intervals=[TimeInterval(at(19, 10), at(19, 11))]
    )


@pytest.fixture
def carol():
    """Carol is busy Tuesday afternoon only."""
    return Participant(
        id="u-carol",
        display_name="Carol",
        busy_intervals=[TimeInterval(at(20, 13), at(20, 17))]
    )


@pytest.fixture
def three_participants(alice, bob, carol):
    return [alice, bob, carol]


# ==================== Calendar Item Fixtures ====================

@pytest.fixture
def team_meeting():
    """A one-hour event Monday 10:00."""
    return CalendarItem(
        id="ev-1",
        title="Team Meeting",
        start=at(19, 10),
        end=at(19, 11),
        owner_id="u-owner",
        kind=ItemKind.EVENT,
        description="Weekly sync; bring notes, please",
        location="Room 4",
    )


@pytest.fixture
def make_item():
    """Factory for items relative to a given instant."""
    def _make(kind, when, item_id="item-1", completed=False, **kwargs):
        return CalendarItem(
            id=item_id,
            title=kwargs.pop("title", f"{kind.value} {item_id}"),
            start=when,
            owner_id="u-owner",
            kind=kind,
            completed=completed,
            **kwargs
        )
    return _make


# ==================== Mock Fixtures ====================

@pytest.fixture
def mock_sink():
    """Alert sink that records deliveries."""
    return Mock()


@pytest.fixture
def mock_background():
    """Stand-in for APScheduler's BackgroundScheduler."""
    background = Mock()
    background.running = False
    return background
