"""Tests for seeded sample events."""

from datetime import datetime

from date_planner.core.planner_core.events import EventStore, Period
from date_planner.core.planner_core.sample_data import (
    date_from,
    example_event,
    rounded_hours_from_now,
    sample_events,
)

NOW = datetime(2026, 1, 1, 10, 15)


class TestDateHelpers:
    """Test sample-data date helpers."""

    def test_rounded_hours_from_now_rounds_up_to_hour_end(self):
        """Test rounding to the end of the containing hour."""
        assert rounded_hours_from_now(60 * 60, NOW) == datetime(2026, 1, 1, 12, 0)

    def test_on_the_hour_moves_to_next_hour(self):
        """Test an exact hour still ends at the following hour."""
        assert rounded_hours_from_now(0, datetime(2026, 1, 1, 11, 0)) == datetime(2026, 1, 1, 12, 0)

    def test_date_from(self):
        """Test building a calendar date."""
        assert date_from(month=6, day=7, year=2021) == datetime(2021, 6, 7)


class TestSampleEvents:
    """Test the seeded sample store."""

    def test_sample_events_fill_every_section(self):
        """Test how the samples spread over the periods."""
        store = EventStore(sample_events(NOW))
        titles = {
            period: [event.title for event in events]
            for period, events in store.sections(NOW)
        }

        assert len(store) == 9
        assert titles[Period.NEXT_SEVEN_DAYS] == [
            "Pagliacci",
            "Camping Trip",
            "Game Night",
            "Doctor's Appointment",
        ]
        assert titles[Period.NEXT_THIRTY_DAYS] == ["Sayulita Trip"]
        assert titles[Period.FUTURE] == ["Maya's Birthday", "First Day of School", "Book Launch"]
        assert titles[Period.PAST] == ["WWDC"]

    def test_samples_start_incomplete(self):
        """Test every sample has open tasks."""
        for event in sample_events(NOW):
            assert event.remaining_task_count == len(event.tasks) > 0
            assert not event.is_complete

    def test_example_event(self):
        """Test the preview event."""
        event = example_event(NOW)
        assert event.title == "Sayulita Trip"
        assert event.symbol == "case.fill"
        assert event.period(NOW) is Period.FUTURE
        assert [task.text for task in event.tasks][-1] == "Find an airbnb"
