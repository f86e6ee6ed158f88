# File: zentribe/services/notification_timer.py

import datetime
from typing import Callable, Iterable, List, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from zentribe.core.config_manager import Config
from zentribe.models import Alert, CalendarItem
from zentribe.processors.notification_scheduler import NotificationScheduler
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)

JOB_ID = "zentribe-notification-tick"


class NotificationTimer:
    """
    Periodic host task that wakes the notification scheduler.

    A single recurring job; item_provider is called on every wake so each
    evaluation sees fresh item lists.
    """

    def __init__(
        self,
        scheduler: NotificationScheduler,
        item_provider: Callable[[], Iterable[CalendarItem]],
        tick_seconds: int = Config.NOTIFY_TICK_SECONDS,
        background: Optional[BackgroundScheduler] = None
    ):
        self.scheduler = scheduler
        self.item_provider = item_provider
        self.tick_seconds = tick_seconds
        self.timezone = Config.timezone()
        self._background = background or BackgroundScheduler(timezone=self.timezone)

    @property
    def running(self) -> bool:
        return self._background.running

    def run_once(self, now: Optional[datetime.datetime] = None) -> List[Alert]:
        """Run a single evaluation; errors from the item provider are logged, not raised."""
        now = now or datetime.datetime.now(self.timezone)
        try:
            items = list(self.item_provider())
        except Exception as e:
            logger.error(f"Could not load items for notification tick: {e}", exc_info=True)
            return []
        return self.scheduler.tick(items, now)

    def start(self) -> None:
        if self.running:
            logger.debug("Notification timer already running")
            return
        self._background.add_job(
            self.run_once,
            trigger=IntervalTrigger(seconds=self.tick_seconds),
            id=JOB_ID,
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        self._background.start()
        logger.info(f"Notification timer started (every {self.tick_seconds}s)")

    def stop(self) -> None:
        if not self.running:
            return
        self._background.shutdown(wait=False)
        logger.info("Notification timer stopped")
