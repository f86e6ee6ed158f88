# File: tests/integration/test_meeting_coordinator.py
"""
Integration tests for a full scheduling session.
Finds slots for a group, books one, alerts on it and exports it.
"""

from datetime import date, timedelta

import pytest

from tests.conftest import at
from zentribe.core.meeting_coordinator import MeetingCoordinator
from zentribe.models import DateRange, DayPart, ItemKind, MeetingRequest, Visibility
from zentribe.processors.availability import busy_intervals_from_items
from zentribe.processors.notification_scheduler import NotificationScheduler
from zentribe.services.alert_sink import LoggingAlertSink
from zentribe.services.ics_codec import export_event, import_calendar


@pytest.fixture
def coordinator(scheduling_config, slot_processor):
    return MeetingCoordinator(scheduling_config, slot_processor)


@pytest.fixture
def request_for_monday(team_meeting, three_participants):
    return MeetingRequest(
        duration_minutes=60,
        date_range=DateRange(date(2026, 10, 19), date(2026, 10, 19)),
        preferred_day_parts={DayPart.MORNING},
        owner_busy=busy_intervals_from_items([team_meeting], owner_id="u-owner"),
        participants=three_participants,
        title="Planning",
    )


class TestSchedulingSession:
    """From request to booked event."""

    def test_find_slots_ranks_conflict_free_first(self, coordinator, request_for_monday, monday_morning):
        slots = coordinator.find_slots(request_for_monday, now=monday_morning)

        assert [s.interval.start.hour for s in slots] == [9, 11, 10]
        assert slots[-1].conflicting_names == ["You", "Bob"]
        assert slots[-1].score == 85

    def test_no_slots_when_constraints_are_impossible(self, coordinator, request_for_monday, monday_morning):
        request_for_monday.date_range = DateRange(date(2026, 10, 24), date(2026, 10, 25))
        assert coordinator.find_slots(request_for_monday, now=monday_morning) == []

    def test_book_best_slot(self, coordinator, request_for_monday, monday_morning):
        best = coordinator.find_slots(request_for_monday, now=monday_morning)[0]

        event = coordinator.book(best, "Planning", "u-owner", location="Room 2",
                                 visibility=Visibility.FRIENDS)

        assert event.kind == ItemKind.EVENT
        assert event.start == at(19, 9)
        assert event.end == at(19, 10)
        assert event.owner_id == "u-owner"
        assert event.visibility == Visibility.FRIENDS
        assert event.id

    def test_booked_event_alerts_and_exports(self, coordinator, request_for_monday, monday_morning):
        best = coordinator.find_slots(request_for_monday, now=monday_morning)[0]
        event = coordinator.book(best, "Planning, part 2", "u-owner")
        sink = LoggingAlertSink()

        fired = NotificationScheduler(sink).tick([event], event.start - timedelta(minutes=5))
        imported = import_calendar(export_event(event, now=monday_morning))

        assert [a.item_id for a in fired] == [event.id]
        assert sink.delivered[0].message == "Event 'Planning, part 2' starts in 10 minutes"
        assert imported[0].title == "Planning, part 2"
        assert imported[0].start == event.start
        assert imported[0].end == event.end

    def test_imported_events_block_new_slots(self, coordinator, team_meeting, monday_morning):
        text = export_event(team_meeting, now=monday_morning)
        owned = [e.to_calendar_item("u-owner") for e in import_calendar(text)]
        request = MeetingRequest(
            duration_minutes=60,
            date_range=DateRange(date(2026, 10, 19), date(2026, 10, 19)),
            preferred_day_parts={DayPart.MORNING},
            owner_busy=busy_intervals_from_items(owned),
        )

        slots = coordinator.find_slots(request, now=monday_morning)

        ten = next(s for s in slots if s.interval.start.hour == 10)
        assert ten.conflicting_names == ["You"]


class TestReschedule:
    """Drag and resize against the rest of the calendar."""

    def test_move_onto_booked_slot_is_reported(self, coordinator, team_meeting, request_for_monday, monday_morning):
        best = coordinator.find_slots(request_for_monday, now=monday_morning)[0]
        planning = coordinator.book(best, "Planning", "u-owner")

        report = coordinator.reschedule(team_meeting, at(19, 9, 30), at(19, 10, 30), [team_meeting, planning])

        assert report.conflicting_titles == ["Planning"]

    def test_move_to_free_time(self, coordinator, team_meeting):
        report = coordinator.reschedule(team_meeting, at(19, 14), at(19, 15), [team_meeting])
        assert report.has_conflicts is False
