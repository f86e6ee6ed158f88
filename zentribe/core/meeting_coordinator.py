# File: zentribe/core/meeting_coordinator.py
"""
Meeting coordination for ZenTribe.
Runs a scheduling session from request to the new event handed back to storage.
"""

import uuid
from datetime import datetime
from typing import List, Optional, Sequence

from zentribe.core.config_manager import Config
from zentribe.core.conflicts import ConflictReport, check_reschedule
from zentribe.models import (
    CalendarItem, CandidateSlot, ItemKind, MeetingRequest, SchedulingConfig, Visibility
)
from zentribe.processors.slot_processor import SlotProcessor
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


class MeetingCoordinator:
    """
    Finds meeting times for a group and books the one the user picks.

    Fetching busy intervals and persisting the booked event belong to the
    storage layer; this class only sees already materialized records.
    """

    def __init__(self, config: Optional[SchedulingConfig] = None, slot_processor: Optional[SlotProcessor] = None):
        self.config = config or Config.load_scheduling_config()
        self.slot_processor = slot_processor or SlotProcessor(self.config)

    def find_slots(self, request: MeetingRequest, now: Optional[datetime] = None) -> List[CandidateSlot]:
        """Ranked candidate slots for the request, best first."""
        logger.info(
            f"Finding {request.duration_minutes}-minute slots for "
            f"{len(request.participants)} participant(s)"
        )
        slots = self.slot_processor.generate_slots(
            request.duration_minutes,
            request.date_range,
            request.preferred_day_parts,
            request.owner_busy,
            request.participants,
            now=now,
        )
        if not slots:
            logger.info("No candidate slots; widen the date range or day-parts")
        return slots

    def book(
        self,
        slot: CandidateSlot,
        title: str,
        owner_id: str,
        description: Optional[str] = None,
        location: Optional[str] = None,
        visibility: Visibility = Visibility.PRIVATE
    ) -> CalendarItem:
        """Turn the chosen candidate into a new event for the storage layer."""
        item = CalendarItem(
            id=str(uuid.uuid4()),
            title=title,
            start=slot.interval.start,
            end=slot.interval.end,
            owner_id=owner_id,
            kind=ItemKind.EVENT,
            description=description,
            location=location,
            visibility=visibility,
        )
        if slot.conflicting_names:
            logger.warning(
                f"Booking '{title}' with conflicts for: {', '.join(slot.conflicting_names)}"
            )
        else:
            logger.info(f"Booking '{title}' at {slot.interval.start.isoformat()}")
        return item

    def reschedule(
        self,
        item: CalendarItem,
        new_start: datetime,
        new_end: datetime,
        others: Sequence[CalendarItem]
    ) -> ConflictReport:
        """
        Check a drag or resize of an existing item.

        The move is reported, never refused; callers may save a conflicting edit.
        """
        report = check_reschedule(item, new_start, new_end, others)
        if report.has_conflicts:
            logger.warning(
                f"Moving '{item.title}' overlaps: {', '.join(report.conflicting_titles)}"
            )
        return report
