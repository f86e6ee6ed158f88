# File: tests/unit/test_config.py
"""
Unit tests for configuration loading and validation.
"""

import json

import pytest

from zentribe.core.config_manager import Config
from zentribe.models import DayPart


class TestLoadSchedulingConfig:
    """Tests for Config.load_scheduling_config()."""

    def test_defaults_without_file(self):
        config = Config.load_scheduling_config()

        assert config.timezone == "UTC"
        assert config.max_slot_results == Config.MAX_SLOT_RESULTS
        assert config.owner_name == "You"
        assert config.hours_for(DayPart.MORNING) == range(9, 12)

    def test_file_overrides_defaults(self, tmp_path, monkeypatch):
        config_file = tmp_path / "scheduling.json"
        config_file.write_text(json.dumps({
            "timezone": "Europe/Amsterdam",
            "owner_name": "Me",
            "day_part_hours": {"evening": [17, 21]},
        }))
        monkeypatch.setattr(Config, "SCHEDULING_CONFIG_FILE", config_file)

        config = Config.load_scheduling_config()

        assert config.timezone == "Europe/Amsterdam"
        assert config.owner_name == "Me"
        assert config.hours_for(DayPart.EVENING) == range(17, 21)
        assert config.hours_for(DayPart.MORNING) == range(9, 12)


class TestValidate:
    """Tests for Config.validate()."""

    def test_defaults_are_valid(self):
        assert Config.validate() is True

    def test_unknown_timezone(self, monkeypatch):
        monkeypatch.setattr(Config, "TARGET_TIMEZONE", "Nowhere/Special")
        assert Config.validate() is False

    @pytest.mark.parametrize("attribute, value", [
        ("MAX_SLOT_RESULTS", 0),
        ("NOTIFY_TICK_SECONDS", -1),
        ("NOTIFY_SWEEP_SECONDS", 30),
    ])
    def test_bad_numbers(self, monkeypatch, attribute, value):
        monkeypatch.setattr(Config, attribute, value)
        assert Config.validate() is False

    def test_invalid_hours_in_file(self, tmp_path, monkeypatch):
        config_file = tmp_path / "scheduling.json"
        config_file.write_text(json.dumps({"day_part_hours": {"morning": [12, 9]}}))
        monkeypatch.setattr(Config, "SCHEDULING_CONFIG_FILE", config_file)

        assert Config.validate() is False

    def test_malformed_json(self, tmp_path, monkeypatch):
        config_file = tmp_path / "scheduling.json"
        config_file.write_text("{not json")
        monkeypatch.setattr(Config, "SCHEDULING_CONFIG_FILE", config_file)

        assert Config.validate() is False
