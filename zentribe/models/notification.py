# File: zentribe/models/notification.py

from dataclasses import dataclass
from datetime import datetime
from .enums import ItemKind

@dataclass(frozen=True)
class Alert:
    """A decision that one item should be announced now."""
    item_id: str
    title: str
    kind: ItemKind
    lead_label: str  # e.g. "10 minutes"
    scheduled_time: datetime

    @property
    def message(self) -> str:
        noun = {
            ItemKind.EVENT: "Event",
            ItemKind.REMINDER: "Reminder",
            ItemKind.TODO: "To-do",
        }[self.kind]
        verb = "is due in" if self.kind == ItemKind.TODO else "starts in"
        return f"{noun} '{self.title}' {verb} {self.lead_label}"
