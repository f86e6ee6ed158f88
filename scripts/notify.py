"""
Run the notification timer against a JSON file of calendar items.
The file is re-read on every tick, so edits are picked up while running.

Usage:
    python scripts/notify.py items.json
"""

import json
import sys
import time
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from zentribe.core.config_manager import Config
from zentribe.models import calendar_item_from_dict
from zentribe.processors.notification_scheduler import NotificationScheduler
from zentribe.services.alert_sink import LoggingAlertSink
from zentribe.services.notification_timer import NotificationTimer
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


def load_items(path: Path):
    with open(path, 'r', encoding='utf-8') as f:
        raw_items = json.load(f)
    items = []
    for raw in raw_items:
        try:
            items.append(calendar_item_from_dict(raw))
        except ValueError as e:
            logger.warning(f"Skipping item {raw.get('title', 'Unknown')}: {e}")
    return items


def main() -> int:
    if len(sys.argv) != 2:
        print(__doc__)
        return 1

    items_file = Path(sys.argv[1])
    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    scheduler = NotificationScheduler(LoggingAlertSink())
    timer = NotificationTimer(scheduler, lambda: load_items(items_file))

    timer.run_once()
    timer.start()
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
    finally:
        timer.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
