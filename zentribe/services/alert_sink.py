# File: zentribe/services/alert_sink.py

from typing import Callable, List

from zentribe.models import Alert
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


class AlertSink:
    """Where alert decisions go: toast, OS notification, haptics."""

    def deliver(self, alert: Alert) -> None:
        raise NotImplementedError


class LoggingAlertSink(AlertSink):
    """Writes alerts to the log; also keeps them for inspection."""

    def __init__(self):
        self.delivered: List[Alert] = []

    def deliver(self, alert: Alert) -> None:
        self.delivered.append(alert)
        logger.info(f"ALERT [{alert.kind.value}] {alert.message}")


class CallbackAlertSink(AlertSink):
    """Hands each alert to a host-provided callable, e.g. a toast function."""

    def __init__(self, callback: Callable[[Alert], None]):
        self.callback = callback

    def deliver(self, alert: Alert) -> None:
        self.callback(alert)
