# File: zentribe/models/day_part.py

from enum import Enum
from typing import Dict, Any, Optional

class DayPart(Enum):
    """Parts of the working day a meeting can be requested in."""
    MORNING = "morning"      # 09:00-12:00
    AFTERNOON = "afternoon"  # 13:00-17:00
    EVENING = "evening"      # 18:00-20:00

# Start hours are inclusive, end hours exclusive.
DAY_PART_METADATA: Dict[DayPart, Dict[str, Any]] = {
    DayPart.MORNING: {
        "hours": range(9, 12),
        "label": "Morning (9am-12pm)",
    },
    DayPart.AFTERNOON: {
        "hours": range(13, 17),
        "label": "Afternoon (1pm-5pm)",
    },
    DayPart.EVENING: {
        "hours": range(18, 20),
        "label": "Evening (6pm-8pm)",
    },
}


def day_part_for_hour(hour: int) -> Optional[DayPart]:
    """Return the day-part whose hour range contains `hour`, if any."""
    for part, data in DAY_PART_METADATA.items():
        if hour in data["hours"]:
            return part
    return None
