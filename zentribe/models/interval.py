# File: zentribe/models/interval.py

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator

@dataclass(frozen=True)
class TimeInterval:
    """A half-open span of time, [start, end)."""
    start: datetime
    end: datetime

    def __post_init__(self):
        """Reject zero-length and inverted intervals."""
        if self.end <= self.start:
            raise ValueError(
                f"Interval end must be after start: {self.start.isoformat()} -> {self.end.isoformat()}"
            )

    def duration_minutes(self) -> int:
        """Calculate interval length in minutes."""
        return int((self.end - self.start).total_seconds() / 60)

    def contains(self, instant: datetime) -> bool:
        """Check whether an instant falls inside the interval."""
        return self.start <= instant < self.end

    def overlaps(self, other: 'TimeInterval') -> bool:
        """Check if this interval shares any instant with another."""
        return self.start < other.end and other.start < self.end

    @classmethod
    def from_duration(cls, start: datetime, minutes: int) -> 'TimeInterval':
        return cls(start=start, end=start + timedelta(minutes=minutes))


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""
    start: date
    end: date

    def is_valid(self) -> bool:
        return self.start <= self.end

    def days(self) -> Iterator[date]:
        """Yield every day from start to end, both included."""
        current = self.start
        while current <= self.end:
            yield current
            current += timedelta(days=1)

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end
