"""
Import and export calendar items as iCalendar files.

Usage:
    python scripts/ics_tool.py export items.json calendar.ics
    python scripts/ics_tool.py import calendar.ics --owner USER_ID > items.json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to Python path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from zentribe.core.config_manager import Config
from zentribe.models import calendar_item_from_dict
from zentribe.services.ics_codec import export_calendar, import_calendar
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)


def export_command(args) -> int:
    with open(args.items, 'r', encoding='utf-8') as f:
        raw_items = json.load(f)

    items = []
    for raw in raw_items:
        try:
            items.append(calendar_item_from_dict(raw))
        except ValueError as e:
            logger.warning(f"Skipping item {raw.get('title', 'Unknown')}: {e}")

    # newline='' keeps the CRLF line endings intact
    with open(args.output, 'w', encoding='utf-8', newline='') as f:
        f.write(export_calendar(items))
    logger.info(f"Wrote {len(items)} item(s) to {args.output}")
    return 0


def import_command(args) -> int:
    with open(args.ics, 'r', encoding='utf-8', newline='') as f:
        text = f.read()

    items = [event.to_calendar_item(args.owner).to_dict() for event in import_calendar(text)]
    json.dump(items, sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ZenTribe iCalendar import/export")
    sub = parser.add_subparsers(dest="command", required=True)

    export_parser = sub.add_parser("export", help="Write items from a JSON file to an .ics file")
    export_parser.add_argument("items", type=Path)
    export_parser.add_argument("output", type=Path)
    export_parser.set_defaults(func=export_command)

    import_parser = sub.add_parser("import", help="Print the events of an .ics file as JSON")
    import_parser.add_argument("ics", type=Path)
    import_parser.add_argument("--owner", required=True, help="Owner id for imported events")
    import_parser.set_defaults(func=import_command)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    if not Config.validate():
        logger.error("Configuration validation failed")
        return 1

    try:
        return args.func(args)
    except FileNotFoundError as e:
        logger.error(f"Could not find: {e.filename}")
        return 1
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in items file: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
