# File: zentribe/models/config.py
"""
Data models for ZenTribe scheduling configuration.
"""

from dataclasses import dataclass, field
from typing import Dict, Tuple
from .day_part import DayPart, DAY_PART_METADATA

def _default_day_part_hours() -> Dict[DayPart, Tuple[int, int]]:
    return {
        part: (data["hours"].start, data["hours"].stop)
        for part, data in DAY_PART_METADATA.items()
    }


@dataclass
class SchedulingConfig:
    """Deployment-level scheduling policy."""
    timezone: str = "UTC"
    max_slot_results: int = 10
    owner_name: str = "You"
    day_part_hours: Dict[DayPart, Tuple[int, int]] = field(default_factory=_default_day_part_hours)

    def __post_init__(self):
        """Convert string keys to enum and validate hour ranges."""
        hours = {}
        for key, value in self.day_part_hours.items():
            part = DayPart(key) if isinstance(key, str) else key
            start, end = int(value[0]), int(value[1])
            if not 0 <= start < end <= 24:
                raise ValueError(f"Invalid hour range for {part.value}: {start}-{end}")
            hours[part] = (start, end)
        self.day_part_hours = hours

    def hours_for(self, part: DayPart) -> range:
        start, end = self.day_part_hours.get(part, _default_day_part_hours()[part])
        return range(start, end)

    @classmethod
    def from_dict(cls, data: dict) -> 'SchedulingConfig':
        """Create SchedulingConfig from dictionary (e.g., loaded from JSON)."""
        day_part_hours = _default_day_part_hours()
        for key, value in data.get('day_part_hours', {}).items():
            day_part_hours[DayPart(key)] = tuple(value)

        return cls(
            timezone=data.get('timezone', 'UTC'),
            max_slot_results=int(data.get('max_slot_results', 10)),
            owner_name=data.get('owner_name', 'You'),
            day_part_hours=day_part_hours,
        )
