# File: zentribe/processors/availability.py
"""
Availability aggregation module.
Turns each party's busy intervals into a per-interval availability verdict.
"""

from datetime import timedelta
from typing import Iterable, List, Optional, Sequence

from zentribe.core.config_manager import Config
from zentribe.core.conflicts import has_conflict
from zentribe.models import (
    AvailabilityVerdict, CalendarItem, DateRange, ItemKind, Participant, TimeInterval
)
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


def busy_intervals_from_items(
    items: Iterable[CalendarItem],
    owner_id: Optional[str] = None
) -> List[TimeInterval]:
    """
    Collect the busy intervals implied by persisted calendar items.

    Only events block time. Zero-length items and items owned by someone
    other than `owner_id` (when given) are ignored.
    """
    busy = []
    for item in items:
        if item.kind != ItemKind.EVENT:
            continue
        if owner_id is not None and item.owner_id != owner_id:
            continue
        span = item.interval
        if span is None:
            logger.debug(f"Skipping zero-length item '{item.title}'")
            continue
        busy.append(span)
    busy.sort(key=lambda i: (i.start, i.end))
    return busy


def _clip_to_range(intervals: Sequence[TimeInterval], date_range: DateRange) -> List[TimeInterval]:
    """Keep only the intervals touching the given days."""
    # One day of slack on each side absorbs timezone offsets
    window_start = date_range.start - timedelta(days=1)
    window_end = date_range.end + timedelta(days=1)
    kept = []
    for interval in intervals:
        if interval.end.date() < window_start or interval.start.date() > window_end:
            continue
        kept.append(interval)
    return kept


class AvailabilityAggregator:
    """Answers "who can make it?" for any proposed interval."""

    def __init__(
        self,
        owner_busy: Sequence[TimeInterval],
        participants: Sequence[Participant],
        date_range: Optional[DateRange] = None,
        owner_name: str = Config.OWNER_DISPLAY_NAME
    ):
        """
        Initialize the aggregator.

        Args:
            owner_busy: Requester's own busy intervals
            participants: Invitees with their busy intervals already fetched
            date_range: Optional window; busy intervals outside it are dropped
            owner_name: Name reported when the requester is in conflict
        """
        self.owner_name = owner_name
        self.participants = list(participants)
        self.owner_busy = list(owner_busy)
        self._busy = {}
        self.unknown_participants: List[str] = []

        if date_range is not None:
            self.owner_busy = _clip_to_range(self.owner_busy, date_range)

        for participant in self.participants:
            if not participant.availability_known:
                self.unknown_participants.append(participant.display_name)
                self._busy[participant.id] = []
                continue
            intervals = participant.busy_intervals
            if date_range is not None:
                intervals = _clip_to_range(intervals, date_range)
            self._busy[participant.id] = intervals

        if self.unknown_participants:
            logger.warning(
                f"Availability unknown for {', '.join(self.unknown_participants)}; "
                f"treating as available"
            )

    def check(self, interval: TimeInterval) -> AvailabilityVerdict:
        """Evaluate the owner and every participant against one interval."""
        conflicting_names = []

        owner_available = not has_conflict(interval, self.owner_busy)
        if not owner_available:
            conflicting_names.append(self.owner_name)

        per_participant = {}
        for participant in self.participants:
            available = not has_conflict(interval, self._busy[participant.id])
            per_participant[participant.id] = available
            if not available:
                conflicting_names.append(participant.display_name)

        return AvailabilityVerdict(
            owner_available=owner_available,
            per_participant_available=per_participant,
            conflicting_names=conflicting_names,
            unknown_participants=list(self.unknown_participants),
        )
