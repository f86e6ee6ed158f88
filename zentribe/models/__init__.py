from .enums import ItemKind, Visibility
from .day_part import DayPart, DAY_PART_METADATA, day_part_for_hour
from .common import ensure_aware, parse_iso_datetime
from .interval import TimeInterval, DateRange
from .items import CalendarItem, calendar_item_from_dict
from .participant import Participant
from .slots import AvailabilityVerdict, CandidateSlot, MeetingRequest
from .notification import Alert
from .imported import ImportedEvent
from .config import SchedulingConfig

__all__ = [
    "ItemKind",
    "Visibility",
    "DayPart",
    "DAY_PART_METADATA",
    "day_part_for_hour",
    "ensure_aware",
    "parse_iso_datetime",
    "TimeInterval",
    "DateRange",
    "CalendarItem",
    "calendar_item_from_dict",
    "Participant",
    "AvailabilityVerdict",
    "CandidateSlot",
    "MeetingRequest",
    "Alert",
    "ImportedEvent",
    "SchedulingConfig",
]
