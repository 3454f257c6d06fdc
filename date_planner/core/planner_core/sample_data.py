"""Sample events seeded into the store at startup."""

from datetime import datetime, timedelta
from typing import List, Optional

from .catalog import ColorOption
from .events import Event, EventTask

HOUR = 60 * 60
DAY = HOUR * 24


def rounded_hours_from_now(seconds: float, now: Optional[datetime] = None) -> datetime:
    """`now + seconds`, moved to the end of the hour that contains it."""
    exact = (now or datetime.now()) + timedelta(seconds=seconds)
    hour_start = exact.replace(minute=0, second=0, microsecond=0)
    return hour_start + timedelta(hours=1)


def date_from(month: int, day: int, year: int) -> datetime:
    """Midnight at the start of the given calendar day."""
    return datetime(year, month, day)


def _tasks(*texts: str) -> List[EventTask]:
    return [EventTask(text=text) for text in texts]


def sample_events(now: Optional[datetime] = None) -> List[Event]:
    """Build the sample events relative to `now`."""
    now = now or datetime.now()
    return [
        Event(
            symbol="gift.fill",
            color=ColorOption.RED,
            title="Maya's Birthday",
            tasks=_tasks(
                "Guava kombucha",
                "Paper cups and plates",
                "Cheese plate",
                "Party poppers",
            ),
            date=rounded_hours_from_now(DAY * 30, now),
        ),
        Event(
            symbol="theatermasks.fill",
            color=ColorOption.YELLOW,
            title="Pagliacci",
            tasks=_tasks(
                "Buy new tux",
                "Get tickets",
                "Pick up Carmen at the airport and bring her to the show",
            ),
            date=rounded_hours_from_now(HOUR * 22, now),
        ),
        Event(
            symbol="facemask.fill",
            color=ColorOption.INDIGO,
            title="Doctor's Appointment",
            tasks=_tasks("Bring medical ID", "Record heart rate data"),
            date=rounded_hours_from_now(DAY * 4, now),
        ),
        Event(
            symbol="leaf.fill",
            color=ColorOption.GREEN,
            title="Camping Trip",
            tasks=_tasks(
                "Find a sleeping bag",
                "Bug spray",
                "Paper towels",
                "Food for 4 meals",
                "Straw hat",
            ),
            date=rounded_hours_from_now(HOUR * 36, now),
        ),
        Event(
            symbol="gamecontroller.fill",
            color=ColorOption.CYAN,
            title="Game Night",
            tasks=_tasks("Find a board game to bring", "Bring a desert to share"),
            date=rounded_hours_from_now(DAY * 2, now),
        ),
        Event(
            symbol="graduationcap.fill",
            color=ColorOption.PRIMARY,
            title="First Day of School",
            tasks=_tasks(
                "Notebooks",
                "Pencils",
                "Binder",
                "First day of school outfit",
            ),
            date=rounded_hours_from_now(DAY * 365, now),
        ),
        Event(
            symbol="book.fill",
            color=ColorOption.PURPLE,
            title="Book Launch",
            tasks=_tasks(
                "Finish first draft",
                "Send draft to editor",
                "Final read-through",
            ),
            date=rounded_hours_from_now(DAY * 365 * 2, now),
        ),
        Event(
            symbol="globe.americas.fill",
            color=ColorOption.GRAY,
            title="WWDC",
            tasks=_tasks(
                "Watch Keynote",
                "Watch What's new in SwiftUI",
                "Go to DT developer labs",
                "Learn about Create ML",
            ),
            date=date_from(month=6, day=7, year=2021),
        ),
        Event(
            symbol="case.fill",
            color=ColorOption.ORANGE,
            title="Sayulita Trip",
            tasks=_tasks(
                "Buy plane tickets",
                "Get a new bathing suit",
                "Find a hotel room",
            ),
            date=rounded_hours_from_now(DAY * 19, now),
        ),
    ]


def example_event(now: Optional[datetime] = None) -> Event:
    """A single preview event about a year and a half out."""
    return Event(
        symbol="case.fill",
        title="Sayulita Trip",
        tasks=_tasks(
            "Buy plane tickets",
            "Get a new bathing suit",
            "Find an airbnb",
        ),
        date=(now or datetime.now()) + timedelta(seconds=DAY * 365 * 1.5),
    )
