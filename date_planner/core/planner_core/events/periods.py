"""Time-bucket classification of event dates."""

from datetime import datetime, timedelta
from enum import Enum


class Period(str, Enum):
    """List sections, in display order."""

    NEXT_SEVEN_DAYS = "Next 7 Days"
    NEXT_THIRTY_DAYS = "Next 30 Days"
    FUTURE = "Future"
    PAST = "Past"

    @property
    def display_name(self) -> str:
        return self.value


def seven_days_out(moment: datetime) -> datetime:
    """Same wall-clock time seven calendar days later."""
    return moment + timedelta(days=7)


def thirty_days_out(moment: datetime) -> datetime:
    """Same wall-clock time thirty calendar days later."""
    return moment + timedelta(days=30)


def is_past(date: datetime, now: datetime) -> bool:
    return date < now


def is_within_seven_days(date: datetime, now: datetime) -> bool:
    return not is_past(date, now) and date < seven_days_out(now)


def is_within_seven_to_thirty_days(date: datetime, now: datetime) -> bool:
    return (
        not is_past(date, now)
        and not is_within_seven_days(date, now)
        and date < thirty_days_out(now)
    )


def is_distant(date: datetime, now: datetime) -> bool:
    return date >= thirty_days_out(now)


def classify(date: datetime, now: datetime) -> Period:
    """Return the single period a date falls into relative to `now`."""
    if is_past(date, now):
        return Period.PAST
    if is_within_seven_days(date, now):
        return Period.NEXT_SEVEN_DAYS
    if is_within_seven_to_thirty_days(date, now):
        return Period.NEXT_THIRTY_DAYS
    return Period.FUTURE


def matches(period: Period, date: datetime, now: datetime) -> bool:
    """Check a date against the predicate for one period."""
    if period is Period.NEXT_SEVEN_DAYS:
        return is_within_seven_days(date, now)
    elif period is Period.NEXT_THIRTY_DAYS:
        return is_within_seven_to_thirty_days(date, now)
    elif period is Period.FUTURE:
        return is_distant(date, now)
    elif period is Period.PAST:
        return is_past(date, now)
    raise ValueError(f"Unsupported period: {period}")
