"""In-memory event store with synchronous change notification."""

import logging
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Tuple
from uuid import UUID

from .models import Event
from .periods import Period, matches

logger = logging.getLogger(__name__)

EVENT_ADDED = "event_added"
EVENT_UPDATED = "event_updated"
EVENT_DELETED = "event_deleted"

Observer = Callable[[str, Event], None]


class EventStore:
    """The single authoritative, ordered collection of events.

    Insertion order is kept; `query` and `sections` return views sorted by
    date. Every mutation notifies subscribed observers before returning.
    """

    def __init__(self, events: Optional[Iterable[Event]] = None):
        """Initialize event store.

        Args:
            events: Initial events, kept in the given order
        """
        self._events: List[Event] = list(events or [])
        self._observers: List[Observer] = []

    @property
    def events(self) -> Tuple[Event, ...]:
        """All events in insertion order."""
        return tuple(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer called as observer(change_type, event).

        Returns:
            A callable that removes the observer again
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self, change_type: str, event: Event) -> None:
        logger.debug(f"{change_type}: {event.title!r} ({event.id})")
        for observer in list(self._observers):
            observer(change_type, event)

    def add(self, event: Event) -> None:
        """Append an event. Duplicate ids are not checked."""
        self._events.append(event)
        logger.info(f"Added event {event.title!r}")
        self._notify(EVENT_ADDED, event)

    def delete(self, event: Event) -> None:
        """Remove the entry with the same id; silently ignore unknown ids."""
        index = self._index_of(event.id)
        if index is None:
            logger.debug(f"Delete ignored, no event with id {event.id}")
            return
        removed = self._events.pop(index)
        logger.info(f"Deleted event {removed.title!r}")
        self._notify(EVENT_DELETED, removed)

    def exists(self, event: Event) -> bool:
        return self._index_of(event.id) is not None

    def get(self, event_id: UUID) -> Optional[Event]:
        """Look up an event by id, None when absent."""
        index = self._index_of(event_id)
        return self._events[index] if index is not None else None

    def update(self, event: Event) -> bool:
        """Overwrite the stored entry that has the same id, in place.

        Returns:
            True if an entry was replaced, False if the id is not stored
        """
        index = self._index_of(event.id)
        if index is None:
            logger.warning(f"Update skipped, event {event.id} is no longer stored")
            return False
        self._events[index] = event
        self._notify(EVENT_UPDATED, event)
        return True

    def update_many(self, events: Iterable[Event]) -> int:
        """Write back a whole projection; returns how many entries were replaced."""
        return sum(1 for event in events if self.update(event))

    def query(self, period: Period, now: Optional[datetime] = None) -> List[Event]:
        """Events in `period`, sorted ascending by date.

        Args:
            period: Time bucket to filter on
            now: Reference instant (read from the clock if None)

        Returns:
            The stored event objects; pass edited versions to `update`
        """
        now = now or datetime.now()
        selected = [event for event in self._events if matches(period, event.date, now)]
        return sorted(selected, key=lambda event: event.date)

    def sections(self, now: Optional[datetime] = None) -> List[Tuple[Period, List[Event]]]:
        """Non-empty periods in display order with their sorted events."""
        now = now or datetime.now()
        result = []
        for period in Period:
            events = self.query(period, now)
            if events:
                result.append((period, events))
        return result

    def _index_of(self, event_id: UUID) -> Optional[int]:
        for index, event in enumerate(self._events):
            if event.id == event_id:
                return index
        return None
