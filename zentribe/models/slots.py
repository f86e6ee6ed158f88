# File: zentribe/models/slots.py

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set
from .day_part import DayPart
from .interval import TimeInterval, DateRange
from .participant import Participant

@dataclass
class AvailabilityVerdict:
    """Who can and cannot make a proposed interval."""
    owner_available: bool
    per_participant_available: Dict[str, bool] = field(default_factory=dict)
    conflicting_names: List[str] = field(default_factory=list)
    unknown_participants: List[str] = field(default_factory=list)

    @property
    def conflict_count(self) -> int:
        """Number of parties (owner included) in conflict."""
        return len(self.conflicting_names)

    @property
    def everyone_available(self) -> bool:
        return self.conflict_count == 0


@dataclass
class CandidateSlot:
    """A proposed meeting interval with its availability and score."""
    interval: TimeInterval
    per_participant_available: Dict[str, bool] = field(default_factory=dict)
    conflicting_names: List[str] = field(default_factory=list)
    score: int = 0

    @property
    def is_fully_available(self) -> bool:
        return not self.conflicting_names

    def to_dict(self) -> dict:
        return {
            'start_time': self.interval.start.isoformat(),
            'end_time': self.interval.end.isoformat(),
            'per_participant_available': dict(self.per_participant_available),
            'conflicting_names': list(self.conflicting_names),
            'score': self.score,
        }


@dataclass
class MeetingRequest:
    """Everything the slot generator needs for one scheduling session."""
    duration_minutes: int
    date_range: DateRange
    preferred_day_parts: Set[DayPart] = field(default_factory=set)
    owner_busy: List[TimeInterval] = field(default_factory=list)
    participants: List[Participant] = field(default_factory=list)
    title: Optional[str] = None

    def __post_init__(self):
        """Convert string day-parts to enum."""
        self.preferred_day_parts = {
            DayPart(p) if isinstance(p, str) else p
            for p in self.preferred_day_parts
        }
