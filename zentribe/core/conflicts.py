# File: zentribe/core/conflicts.py
"""
Interval overlap and conflict checks.

Everything here is pure: no logging, no I/O. Intervals are half-open, so two
intervals that only touch at a boundary instant never conflict.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Sequence

from zentribe.models import TimeInterval, CalendarItem, ItemKind


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    """True iff the two intervals share at least one instant."""
    return a.start < b.end and b.start < a.end


def has_conflict(candidate: TimeInterval, existing: Iterable[TimeInterval]) -> bool:
    """True if the candidate overlaps any of the existing intervals."""
    return any(overlaps(candidate, other) for other in existing)


def find_conflicts(candidate: TimeInterval, existing: Iterable[TimeInterval]) -> List[TimeInterval]:
    """Return the existing intervals the candidate overlaps, in input order."""
    return [other for other in existing if overlaps(candidate, other)]


@dataclass
class ConflictReport:
    """Outcome of moving or resizing an item."""
    item_id: str
    proposed: TimeInterval
    conflicts: List[CalendarItem] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)

    @property
    def conflicting_titles(self) -> List[str]:
        return [item.title for item in self.conflicts]


def check_reschedule(
    item: CalendarItem,
    new_start: datetime,
    new_end: datetime,
    others: Sequence[CalendarItem],
) -> ConflictReport:
    """
    Report which items a drag or resize would double-book.

    The edit is never refused; the caller decides what to do with the report.
    Raises ValueError if new_end is not after new_start.
    """
    proposed = TimeInterval(new_start, new_end)
    conflicts = []
    for other in others:
        if other.id == item.id:
            continue
        if other.kind == ItemKind.TODO and other.completed:
            continue
        span = other.interval
        if span is not None and overlaps(proposed, span):
            conflicts.append(other)
    return ConflictReport(item_id=item.id, proposed=proposed, conflicts=conflicts)
