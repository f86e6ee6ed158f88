# File: zentribe/processors/slot_processor.py
"""
Slot generation module.
Enumerates candidate meeting slots across a date range and ranks them by
availability, day-part preference, time-of-day and how soon they are.
"""

import datetime
from typing import Callable, Iterable, List, Optional, Sequence, Set
import pytz

from zentribe.core.config_manager import Config
from zentribe.core.conflicts import has_conflict
from zentribe.models import (
    CandidateSlot, DateRange, DayPart, Participant, SchedulingConfig, TimeInterval, ensure_aware
)
from zentribe.processors.availability import AvailabilityAggregator
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)

SATURDAY = 5
# Generation order within a day, independent of set iteration order
DAY_PART_ORDER = [DayPart.MORNING, DayPart.AFTERNOON, DayPart.EVENING]


def score_slot(
    start: datetime.datetime,
    conflict_count: int,
    preferred_day_parts: Set[DayPart],
    now: datetime.datetime,
    config: Optional[SchedulingConfig] = None
) -> int:
    """
    Score one candidate start time.

    Baseline 100, then:
        -20 per conflicting party
        +10 if the start hour lies in a preferred day-part (at most once)
        -20 before 09:00, -15 at or after 19:00
        +15 if the start date is at most 3 days after today, otherwise
        +10 if at most 7 days
    """
    config = config or SchedulingConfig()
    score = Config.BASE_SLOT_SCORE

    score -= Config.CONFLICT_PENALTY * conflict_count

    hour = start.hour
    if any(hour in config.hours_for(part) for part in preferred_day_parts):
        score += Config.PREFERRED_PART_BONUS

    if hour < Config.EARLY_START_HOUR:
        score -= Config.EARLY_PENALTY
    elif hour >= Config.LATE_START_HOUR:
        score -= Config.LATE_PENALTY

    # Whole calendar days, counted in the slot's own timezone
    if start.tzinfo is not None and now.tzinfo is not None:
        now = now.astimezone(start.tzinfo)
    days_ahead = (start.date() - now.date()).days
    if days_ahead <= Config.SOON_DAYS:
        score += Config.SOON_BONUS
    elif days_ahead <= Config.THIS_WEEK_DAYS:
        score += Config.THIS_WEEK_BONUS

    return score


class SlotProcessor:
    """Generates and ranks candidate meeting slots."""

    def __init__(
        self,
        config: Optional[SchedulingConfig] = None,
        now_provider: Optional[Callable[[], datetime.datetime]] = None
    ):
        """
        Initialize slot processor.

        Args:
            config: Scheduling policy (timezone, result cap, day-part hours)
            now_provider: Clock used when no evaluation time is passed
        """
        self.config = config or Config.load_scheduling_config()
        self.timezone = pytz.timezone(self.config.timezone)
        self.now_provider = now_provider or (lambda: datetime.datetime.now(self.timezone))

    def _aware(self, value: datetime.datetime) -> datetime.datetime:
        """Interpret naive datetimes in the configured timezone."""
        return ensure_aware(value, self.timezone)

    def _aware_intervals(self, intervals: Iterable[TimeInterval]) -> List[TimeInterval]:
        return [TimeInterval(self._aware(i.start), self._aware(i.end)) for i in intervals]

    def _slot_start(self, day: datetime.date, hour: int) -> datetime.datetime:
        return self.timezone.localize(datetime.datetime.combine(day, datetime.time(hour=hour)))

    def generate_slots(
        self,
        duration_minutes: int,
        date_range: DateRange,
        preferred_day_parts: Set[DayPart],
        owner_busy: Sequence[TimeInterval],
        participants: Sequence[Participant],
        now: Optional[datetime.datetime] = None
    ) -> List[CandidateSlot]:
        """
        Propose meeting slots, best first.

        Returns:
            At most `max_slot_results` candidates sorted by score; ties keep
            generation order. An empty list means the constraints admit no
            slot and the caller should widen them.
        """
        if duration_minutes <= 0:
            logger.info(f"No slots: duration must be positive (got {duration_minutes})")
            return []
        if not date_range.is_valid():
            logger.info(f"No slots: date range {date_range.start} > {date_range.end}")
            return []
        parts = {DayPart(p) if isinstance(p, str) else p for p in preferred_day_parts}
        if not parts:
            logger.info("No slots: no day-part selected")
            return []

        now = self._aware(now) if now is not None else self.now_provider()

        known = [
            Participant(p.id, p.display_name, self._aware_intervals(p.busy_intervals))
            if p.availability_known else p
            for p in participants
        ]
        aggregator = AvailabilityAggregator(
            self._aware_intervals(owner_busy),
            known,
            date_range=date_range,
            owner_name=self.config.owner_name,
        )

        candidates: List[CandidateSlot] = []
        for day in date_range.days():
            if day.weekday() >= SATURDAY:
                continue
            for part in DAY_PART_ORDER:
                if part not in parts:
                    continue
                for hour in self.config.hours_for(part):
                    start = self._slot_start(day, hour)
                    if start < now:
                        continue
                    interval = TimeInterval.from_duration(start, duration_minutes)
                    verdict = aggregator.check(interval)
                    candidates.append(CandidateSlot(
                        interval=interval,
                        per_participant_available=verdict.per_participant_available,
                        conflicting_names=verdict.conflicting_names,
                        score=score_slot(start, verdict.conflict_count, parts, now, self.config),
                    ))

        # sorted() is stable, so equal scores keep generation order
        ranked = sorted(candidates, key=lambda c: c.score, reverse=True)
        result = ranked[:self.config.max_slot_results]

        logger.info(
            f"Generated {len(candidates)} candidate slots over "
            f"{date_range.start}..{date_range.end}, returning {len(result)}"
        )
        return result

    def suggest_free_slots(
        self,
        duration_minutes: int,
        existing: Sequence[TimeInterval],
        now: Optional[datetime.datetime] = None,
        days: int = 7,
        start_hour: int = 9,
        end_hour: int = 17,
        limit: int = 5
    ) -> List[TimeInterval]:
        """
        Quick suggestions for a single calendar: the first conflict-free
        whole-hour starts over the next `days` days.
        """
        if duration_minutes <= 0:
            return []
        now = self._aware(now) if now is not None else self.now_provider()
        busy = self._aware_intervals(existing)

        suggestions = []
        for offset in range(days):
            day = now.date() + datetime.timedelta(days=offset)
            for hour in range(start_hour, end_hour):
                start = self._slot_start(day, hour)
                if start < now:
                    continue
                interval = TimeInterval.from_duration(start, duration_minutes)
                if not has_conflict(interval, busy):
                    suggestions.append(interval)
                    if len(suggestions) >= limit:
                        return suggestions
        return suggestions


def generate_slots(
    duration_minutes: int,
    date_range: DateRange,
    preferred_day_parts: Set[DayPart],
    owner_busy: Sequence[TimeInterval],
    participants: Sequence[Participant],
    now: Optional[datetime.datetime] = None
) -> List[CandidateSlot]:
    """Rank candidate slots with the default scheduling configuration."""
    return SlotProcessor().generate_slots(
        duration_minutes, date_range, preferred_day_parts, owner_busy, participants, now=now
    )
