"""Event records, classification, and the event store."""

from .models import Event, EventTask
from .periods import (
    Period,
    classify,
    matches,
    seven_days_out,
    thirty_days_out,
)
from .store import (
    EVENT_ADDED,
    EVENT_DELETED,
    EVENT_UPDATED,
    EventStore,
)

__all__ = [
    "Event",
    "EventTask",
    "Period",
    "classify",
    "matches",
    "seven_days_out",
    "thirty_days_out",
    "EventStore",
    "EVENT_ADDED",
    "EVENT_UPDATED",
    "EVENT_DELETED",
]
