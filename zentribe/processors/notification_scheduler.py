# File: zentribe/processors/notification_scheduler.py
"""
Notification scheduling module.
Decides which upcoming items should alert now, exactly once per occurrence,
and reclaims bookkeeping for items whose time has passed.
"""

import datetime
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from zentribe.core.config_manager import Config
from zentribe.models import Alert, CalendarItem, ItemKind, ensure_aware
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


def localize_item(item: CalendarItem, tz) -> CalendarItem:
    """
    Return the item with naive times read in `tz`.

    Rows without a UTC offset come back naive from the factories; comparing
    them with an aware clock would raise TypeError.
    """
    times = (item.start, item.end, item.snoozed_until)
    if all(t is None or t.tzinfo is not None for t in times):
        return item
    return replace(
        item,
        start=ensure_aware(item.start, tz),
        end=ensure_aware(item.end, tz),
        snoozed_until=ensure_aware(item.snoozed_until, tz) if item.snoozed_until else None,
    )


@dataclass(frozen=True)
class AlertRule:
    """Look-ahead rule for one kind of item."""
    kind: ItemKind
    lookahead: datetime.timedelta
    lead_label: str
    requires_open: bool = True

    def matches(self, item: CalendarItem, now: datetime.datetime) -> bool:
        """True when the item's time lies inside [now, now + lookahead]."""
        if item.kind != self.kind:
            return False
        if self.requires_open and item.completed:
            return False
        if item.is_snoozed(now):
            return False
        return now <= item.scheduled_time <= now + self.lookahead


DEFAULT_RULES = [
    AlertRule(
        ItemKind.REMINDER,
        datetime.timedelta(minutes=Config.REMINDER_LOOKAHEAD_MINUTES),
        f"{Config.REMINDER_LOOKAHEAD_MINUTES} minutes",
    ),
    AlertRule(
        ItemKind.TODO,
        datetime.timedelta(minutes=Config.TODO_LOOKAHEAD_MINUTES),
        f"{Config.TODO_LOOKAHEAD_MINUTES} minutes",
    ),
    AlertRule(
        ItemKind.EVENT,
        datetime.timedelta(minutes=Config.EVENT_LOOKAHEAD_MINUTES),
        f"{Config.EVENT_LOOKAHEAD_MINUTES} minutes",
        requires_open=False,
    ),
]


class NotificationState:
    """
    Ids already alerted, each with the scheduled time of the alerted occurrence.

    In memory only; a new process starts with an empty state.
    """

    def __init__(self):
        self._alerted: Dict[str, datetime.datetime] = {}

    def is_alerted(self, item: CalendarItem) -> bool:
        return self._alerted.get(item.id) == item.scheduled_time

    def mark(self, item: CalendarItem) -> None:
        self._alerted[item.id] = item.scheduled_time

    def discard_expired(self, now: datetime.datetime) -> int:
        """Forget occurrences whose time has passed. Returns how many were removed."""
        expired = [item_id for item_id, when in self._alerted.items() if when < now]
        for item_id in expired:
            del self._alerted[item_id]
        return len(expired)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._alerted

    def __len__(self) -> int:
        return len(self._alerted)


class NotificationScheduler:
    """Evaluates item lists against look-ahead windows on every tick."""

    def __init__(
        self,
        alert_sink,
        state: Optional[NotificationState] = None,
        rules: Optional[List[AlertRule]] = None,
        sweep_interval: datetime.timedelta = datetime.timedelta(seconds=Config.NOTIFY_SWEEP_SECONDS),
        timezone=None
    ):
        """
        Initialize the scheduler.

        Args:
            alert_sink: Object with a deliver(alert) method
            state: Bookkeeping to reuse; a fresh one is created by default
            rules: Look-ahead rules, one per item kind
            sweep_interval: Minimum time between two expiry sweeps
            timezone: pytz zone for naive item times (configured zone by default)
        """
        self.alert_sink = alert_sink
        self.state = state if state is not None else NotificationState()
        self.rules = {rule.kind: rule for rule in (rules or DEFAULT_RULES)}
        self.sweep_interval = sweep_interval
        self.timezone = timezone or Config.timezone()
        self._last_sweep: Optional[datetime.datetime] = None

    def evaluate(self, items: Iterable[CalendarItem], now: datetime.datetime) -> List[Alert]:
        """
        Fire an alert for every item entering its window for the first time.

        The item is marked before delivery; a failing sink is logged and the
        mark stays, so an occurrence is alerted at most once. An item that
        cannot be evaluated is logged and skipped without affecting the rest.
        """
        now = ensure_aware(now, self.timezone)
        fired = []
        for item in items:
            rule = self.rules.get(item.kind)
            if rule is None:
                continue
            try:
                item = localize_item(item, self.timezone)
                if not rule.matches(item, now):
                    continue
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping unreadable item '{item.title}' ({item.id}): {e}")
                continue
            if self.state.is_alerted(item):
                continue

            self.state.mark(item)
            alert = Alert(
                item_id=item.id,
                title=item.title,
                kind=item.kind,
                lead_label=rule.lead_label,
                scheduled_time=item.scheduled_time,
            )
            fired.append(alert)

            try:
                self.alert_sink.deliver(alert)
            except Exception as e:
                logger.error(f"Alert delivery failed for '{item.title}': {e}", exc_info=True)

        if fired:
            logger.info(f"Fired {len(fired)} alert(s)")
        return fired

    def sweep(self, now: datetime.datetime) -> int:
        """Reclaim state for occurrences already in the past."""
        now = ensure_aware(now, self.timezone)
        removed = self.state.discard_expired(now)
        self._last_sweep = now
        if removed:
            logger.debug(f"Swept {removed} expired notification entries")
        return removed

    def tick(self, items: Iterable[CalendarItem], now: datetime.datetime) -> List[Alert]:
        """One timer wake: evaluate, then sweep if the sweep interval has elapsed."""
        now = ensure_aware(now, self.timezone)
        fired = self.evaluate(items, now)
        if self._last_sweep is None or now - self._last_sweep >= self.sweep_interval:
            self.sweep(now)
        return fired


def reminder_stats(items: Iterable[CalendarItem], now: datetime.datetime, timezone=None) -> Dict[str, int]:
    """
    Dashboard counters for reminders.

    today/upcoming count open reminders, split at the next midnight;
    overdue counts open reminders whose time has passed and that are not
    snoozed at `now`.
    """
    tz = timezone or Config.timezone()
    now = ensure_aware(now, tz)
    reminders = [localize_item(i, tz) for i in items if i.kind == ItemKind.REMINDER]
    start_of_day = now.replace(hour=0, minute=0, second=0, microsecond=0)
    tomorrow = start_of_day + datetime.timedelta(days=1)

    return {
        'total': len(reminders),
        'today': sum(1 for r in reminders if start_of_day <= r.start < tomorrow and not r.completed),
        'upcoming': sum(1 for r in reminders if r.start >= tomorrow and not r.completed),
        'completed': sum(1 for r in reminders if r.completed),
        'snoozed': sum(1 for r in reminders if r.is_snoozed(now)),
        'overdue': sum(
            1 for r in reminders
            if not r.completed and r.start < now and not r.is_snoozed(now)
        ),
    }
