# File: zentribe/services/ics_codec.py
"""
Plain-text calendar interchange (iCalendar) import and export.

Export writes a VCALENDAR envelope with one VEVENT block per item, CRLF line
endings and escaped text fields. Import is best-effort: it keeps whatever it
can read and skips lines it cannot.
"""

import datetime
import re
from typing import Dict, Iterable, List, Optional

import pytz

from zentribe.core.config_manager import Config
from zentribe.models import CalendarItem, ImportedEvent
from zentribe.utils.logger import setup_logger

logger = setup_logger(__name__)

CRLF = "\r\n"
ICS_DATE_FORMAT = "%Y%m%dT%H%M%SZ"

# Backslash must go first so the other escapes are not doubled
_ESCAPES = [("\\", "\\\\"), (";", "\\;"), (",", "\\,"), ("\n", "\\n")]
_UNESCAPES = {"n": "\n", "N": "\n", ",": ",", ";": ";", "\\": "\\"}
_ESCAPE_SEQUENCE = re.compile(r"\\(.)", re.DOTALL)

_ICS_DATE = re.compile(r"^(\d{4})(\d{2})(\d{2})(?:T(\d{2})(\d{2})(\d{2})?)?(Z)?$")

_TEXT_FIELDS = {"SUMMARY": "title", "DESCRIPTION": "description", "LOCATION": "location"}
_DATE_FIELDS = {"DTSTART": "start", "DTEND": "end"}


def escape_text(text: str) -> str:
    """Escape backslash, semicolon, comma and newline for a text value."""
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def unescape_text(text: str) -> str:
    """
    Undo escape_text.

    A single left-to-right pass, so an escaped backslash followed by 'n' stays
    a backslash and an 'n'. Unknown sequences are kept as written.
    """
    return _ESCAPE_SEQUENCE.sub(lambda m: _UNESCAPES.get(m.group(1), m.group(0)), text)


def format_ics_date(value: datetime.datetime) -> str:
    """Format as YYYYMMDDThhmmssZ in UTC; naive values are taken as local time."""
    if value.tzinfo is None:
        value = Config.timezone().localize(value)
    return value.astimezone(pytz.utc).strftime(ICS_DATE_FORMAT)


def parse_ics_date(value: str, tzid: Optional[str] = None) -> datetime.datetime:
    """
    Parse a compact iCalendar timestamp.

    Accepts a trailing 'Z' (UTC) or none (floating time, taken in `tzid` or
    the configured timezone), and a missing seconds field. A bare date
    (VALUE=DATE, all-day events) is midnight of that day.

    Raises:
        ValueError: If the value is not a compact timestamp
    """
    match = _ICS_DATE.match(value.strip())
    if not match:
        raise ValueError(f"Not an iCalendar timestamp: {value!r}")

    year, month, day, hour, minute, second, utc = match.groups()
    naive = datetime.datetime(
        int(year), int(month), int(day), int(hour or 0), int(minute or 0), int(second or 0)
    )
    if utc:
        return pytz.utc.localize(naive)

    tz = Config.timezone()
    if tzid:
        try:
            tz = pytz.timezone(tzid)
        except pytz.UnknownTimeZoneError:
            logger.debug(f"Unknown TZID {tzid!r}, using {tz.zone}")
    return tz.localize(naive)


def _event_lines(item: CalendarItem, stamp: str) -> List[str]:
    lines = [
        "BEGIN:VEVENT",
        f"UID:{item.id}@{Config.ICS_UID_DOMAIN}",
        f"DTSTAMP:{stamp}",
        f"DTSTART:{format_ics_date(item.start)}",
        f"DTEND:{format_ics_date(item.end)}",
        f"SUMMARY:{escape_text(item.title)}",
    ]
    if item.description:
        lines.append(f"DESCRIPTION:{escape_text(item.description)}")
    if item.location:
        lines.append(f"LOCATION:{escape_text(item.location)}")
    lines.append("END:VEVENT")
    return lines


def export_calendar(items: Iterable[CalendarItem], now: Optional[datetime.datetime] = None) -> str:
    """
    Serialize items into one interchange document.

    Args:
        items: Items to export, in output order
        now: Conversion time written to every DTSTAMP (defaults to now)

    Returns:
        The document text with CRLF line endings
    """
    stamp = format_ics_date(now or datetime.datetime.now(pytz.utc))
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{Config.ICS_PRODUCT_ID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
    ]
    count = 0
    for item in items:
        lines.extend(_event_lines(item, stamp))
        count += 1
    lines.append("END:VCALENDAR")

    logger.info(f"Exported {count} item(s) to iCalendar")
    return CRLF.join(lines)


def export_event(item: CalendarItem, now: Optional[datetime.datetime] = None) -> str:
    """Serialize a single item, e.g. for an 'add to calendar' download."""
    return export_calendar([item], now=now)


def _unfold(text: str) -> List[str]:
    """Split into lines and join folded continuation lines."""
    lines: List[str] = []
    for raw in re.split(r"\r?\n", text):
        if raw[:1] in (" ", "\t") and lines:
            lines[-1] += raw[1:]
        else:
            lines.append(raw)
    return lines


def _parse_key(key: str):
    """'DTSTART;TZID=Europe/Amsterdam' -> ('DTSTART', {'TZID': 'Europe/Amsterdam'})"""
    name, *raw_params = key.split(";")
    params = {}
    for param in raw_params:
        p_name, _, p_value = param.partition("=")
        params[p_name.upper()] = p_value.strip('"')
    return name.strip().upper(), params


def _finish(fields: Dict, imported_at: datetime.datetime) -> ImportedEvent:
    start = fields.get("start") or imported_at
    end = fields.get("end") or start + datetime.timedelta(minutes=Config.IMPORTED_EVENT_MINUTES)
    return ImportedEvent(
        title=fields.get("title") or Config.IMPORTED_EVENT_TITLE,
        description=fields.get("description", ""),
        location=fields.get("location", ""),
        start=start,
        end=end,
    )


def import_calendar(text: str, now: Optional[datetime.datetime] = None) -> List[ImportedEvent]:
    """
    Parse an interchange document into imported events.

    Unrecognized keys, nested components (alarms) and unreadable field lines
    are skipped. An END:VEVENT without an open block is ignored. A block
    without DTEND lasts the default imported-event duration; one without
    DTSTART starts at `now`.
    """
    imported_at = now or datetime.datetime.now(pytz.utc)
    events: List[ImportedEvent] = []
    current: Optional[Dict] = None
    nested = 0
    skipped = 0

    for line in _unfold(text):
        marker = line.strip()
        if not marker:
            continue

        if marker == "BEGIN:VEVENT":
            current = {}
            nested = 0
            continue
        if marker == "END:VEVENT":
            if current is not None:
                events.append(_finish(current, imported_at))
            current = None
            continue
        if current is None:
            continue

        # Components inside an event (VALARM) carry their own DESCRIPTION
        if marker.startswith("BEGIN:"):
            nested += 1
            continue
        if marker.startswith("END:"):
            nested = max(0, nested - 1)
            continue
        if nested:
            continue

        key, sep, value = line.partition(":")
        if not sep:
            skipped += 1
            continue
        name, params = _parse_key(key)

        if name in _TEXT_FIELDS:
            current[_TEXT_FIELDS[name]] = unescape_text(value)
        elif name in _DATE_FIELDS:
            try:
                current[_DATE_FIELDS[name]] = parse_ics_date(value, params.get("TZID"))
            except ValueError as e:
                skipped += 1
                logger.debug(f"Skipping {name} line: {e}")

    if current is not None:
        logger.debug("Document ended inside an unterminated VEVENT; block dropped")

    logger.info(f"Imported {len(events)} event(s) from iCalendar ({skipped} line(s) skipped)")
    return events
