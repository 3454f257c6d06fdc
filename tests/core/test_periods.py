"""Tests for time-bucket classification."""

from datetime import datetime, timedelta

import pytest

from date_planner.core.planner_core.events import (
    Period,
    classify,
    matches,
    seven_days_out,
    thirty_days_out,
)

NOW = datetime(2026, 3, 10, 12, 0)


class TestPeriodBoundaries:
    """Test where each period starts and ends."""

    def test_period_order_matches_list_sections(self):
        """Test that periods iterate in the order the list shows them."""
        assert [p.display_name for p in Period] == [
            "Next 7 Days",
            "Next 30 Days",
            "Future",
            "Past",
        ]

    def test_days_out_keep_wall_clock_time(self):
        """Test calendar-day offsets."""
        assert seven_days_out(NOW) == datetime(2026, 3, 17, 12, 0)
        assert thirty_days_out(NOW) == datetime(2026, 4, 9, 12, 0)

    def test_one_second_ago_is_past(self):
        """Test that anything before now is past."""
        assert classify(NOW - timedelta(seconds=1), NOW) is Period.PAST

    def test_now_is_within_seven_days(self):
        """Test that the current instant is not past."""
        assert classify(NOW, NOW) is Period.NEXT_SEVEN_DAYS

    def test_exactly_seven_days_moves_to_thirty_day_bucket(self):
        """Test the upper bound of the seven-day bucket is exclusive."""
        assert classify(NOW + timedelta(days=7), NOW) is Period.NEXT_THIRTY_DAYS
        assert classify(NOW + timedelta(days=7, seconds=-1), NOW) is Period.NEXT_SEVEN_DAYS

    def test_exactly_thirty_days_is_future(self):
        """Test that distant starts at thirty days inclusive."""
        assert classify(NOW + timedelta(days=30), NOW) is Period.FUTURE
        assert classify(NOW + timedelta(days=30, seconds=-1), NOW) is Period.NEXT_THIRTY_DAYS


class TestExclusivity:
    """Test that exactly one period holds for any date."""

    @pytest.mark.parametrize("hours", [-5000, -1, 0, 1, 47, 167, 168, 300, 719, 720, 721, 20000])
    def test_exactly_one_period_matches(self, hours):
        """Test mutual exclusion and coverage of the four periods."""
        date = NOW + timedelta(hours=hours)
        matching = [period for period in Period if matches(period, date, NOW)]
        assert matching == [classify(date, NOW)]
