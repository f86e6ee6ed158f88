# File: zentribe/models/participant.py

from dataclasses import dataclass, field
from typing import List, Optional
from .interval import TimeInterval

@dataclass
class Participant:
    """
    Someone invited to a meeting, with their already committed time.

    busy_intervals is None when the intervals could not be fetched; such a
    participant is treated as available and reported as unknown.
    """
    id: str
    display_name: str
    busy_intervals: Optional[List[TimeInterval]] = field(default_factory=list)

    def __post_init__(self):
        if self.busy_intervals is not None:
            self.busy_intervals = sorted(self.busy_intervals, key=lambda i: (i.start, i.end))

    @property
    def availability_known(self) -> bool:
        return self.busy_intervals is not None
