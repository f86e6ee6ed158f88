# File: zentribe/models/items.py

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from .enums import ItemKind, Visibility
from .interval import TimeInterval
from .common import parse_iso_datetime

@dataclass
class CalendarItem:
    """An event, reminder or to-do as handed over by the persistence layer."""
    id: str
    title: str
    start: datetime
    owner_id: str
    kind: ItemKind = ItemKind.EVENT
    end: Optional[datetime] = None
    completed: bool = False

    # Optional metadata
    description: Optional[str] = None
    location: Optional[str] = None
    snoozed_until: Optional[datetime] = None
    visibility: Visibility = Visibility.PRIVATE
    source: str = "personal"

    def __post_init__(self):
        """Validate item data and auto-convert types."""
        if isinstance(self.kind, str):
            self.kind = ItemKind(self.kind)
        if isinstance(self.visibility, str):
            try:
                self.visibility = Visibility(self.visibility)
            except ValueError:
                self.visibility = Visibility.PRIVATE

        # Reminders and to-dos are points in time
        if self.end is None:
            self.end = self.start

        if self.end < self.start:
            raise ValueError(f"Item end time must not be before start time: {self.title}")

    @property
    def scheduled_time(self) -> datetime:
        """The instant notifications are measured against."""
        return self.start

    @property
    def interval(self) -> Optional[TimeInterval]:
        """The busy span of the item, or None for zero-length items."""
        if self.end <= self.start:
            return None
        return TimeInterval(self.start, self.end)

    def is_snoozed(self, now: datetime) -> bool:
        return self.snoozed_until is not None and self.snoozed_until > now

    def duration_minutes(self) -> int:
        """Calculate item duration in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'start_time': self.start.isoformat(),
            'end_time': self.end.isoformat(),
            'owner_id': self.owner_id,
            'event_type': self.kind.value,
            'completed': self.completed,
            'description': self.description,
            'location': self.location,
            'snoozed_until': self.snoozed_until.isoformat() if self.snoozed_until else None,
            'visibility': self.visibility.value,
            'source': self.source,
        }


def calendar_item_from_dict(data: dict) -> CalendarItem:
    """Create CalendarItem from a persisted row with type safety."""
    raw_kind = data.get('event_type') or data.get('kind') or 'event'
    try:
        kind = ItemKind(str(raw_kind).split('.')[-1].lower())
    except ValueError:
        kind = ItemKind.EVENT

    # Reminders store their time under reminder_time, to-dos under due_date
    start = parse_iso_datetime(
        data.get('start_time') or data.get('start')
        or data.get('reminder_time') or data.get('due_date')
    )
    if start is None:
        raise ValueError(f"Item has no usable start time: {data.get('title', 'Unknown')}")

    return CalendarItem(
        id=str(data.get('id', '')),
        title=str(data.get('title') or 'Untitled'),
        start=start,
        end=parse_iso_datetime(data.get('end_time') or data.get('end')),
        owner_id=str(data.get('owner_id') or data.get('user_id') or data.get('created_by') or ''),
        kind=kind,
        completed=bool(data.get('completed', False)),
        description=data.get('description') or None,
        location=data.get('location') or None,
        snoozed_until=parse_iso_datetime(data.get('snoozed_until')),
        visibility=data.get('visibility') or Visibility.PRIVATE,
        source=data.get('source') or 'personal',
    )
