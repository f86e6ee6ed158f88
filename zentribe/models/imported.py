# File: zentribe/models/imported.py

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from .enums import ItemKind, Visibility
from .items import CalendarItem

@dataclass
class ImportedEvent:
    """An event read from an interchange document, not yet owned by anyone."""
    title: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""
    visibility: Visibility = Visibility.PRIVATE
    source: str = "personal"

    def to_calendar_item(self, owner_id: str, item_id: Optional[str] = None) -> CalendarItem:
        """Attach ownership so the record can be persisted."""
        # DTEND before DTSTART is clamped to a point in time
        end = self.end if self.end >= self.start else self.start
        return CalendarItem(
            id=item_id or str(uuid.uuid4()),
            title=self.title,
            start=self.start,
            end=end,
            owner_id=owner_id,
            kind=ItemKind.EVENT,
            description=self.description or None,
            location=self.location or None,
            visibility=self.visibility,
            source=self.source,
        )
