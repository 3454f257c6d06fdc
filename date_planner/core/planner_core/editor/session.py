"""Copy-then-commit editing of a single event."""

import logging
from datetime import datetime

from ..catalog import ColorOption, ColorOptions, EventSymbols
from ..errors import (
    EventDeletedError,
    NotEditingError,
    SessionClosedError,
    TaskNotFoundError,
)
from ..events import Event, EventStore, EventTask

logger = logging.getLogger(__name__)


class EditSession:
    """Editor state for one event opened from the list (or a new one).

    All edits, checklist ticks included, go to `working_copy`; the store
    only changes on `commit`, `primary_action`, or `delete_event`. A closed
    session refuses further edits. Task positions are 1-based, matching
    what the list shows.
    """

    def __init__(self, store: EventStore, event: Event, is_new: bool = False):
        """Open an editing session.

        Args:
            store: Store the event belongs to (or will be added to)
            event: Event to edit; a copy is taken immediately
            is_new: True when the event is not in the store yet
        """
        self.store = store
        self.event_id = event.id
        self.is_new = is_new
        self.working_copy = event.working_copy()
        self._is_editing = is_new
        self.is_closed = False

    @property
    def is_editing(self) -> bool:
        return self.is_new or self._is_editing

    @property
    def is_event_deleted(self) -> bool:
        """The event this session was opened on is gone from the store."""
        return not self.is_new and not self.store.exists(self.working_copy)

    @property
    def action_label(self) -> str:
        if self.is_new:
            return "Add"
        return "Done" if self.is_editing else "Edit"

    def _ensure_open(self) -> None:
        if self.is_closed:
            raise SessionClosedError()
        if self.is_event_deleted:
            raise EventDeletedError(str(self.event_id))

    def _ensure_editing(self) -> None:
        self._ensure_open()
        if not self.is_editing:
            raise NotEditingError()

    def _task_at(self, position: int) -> EventTask:
        if position < 1 or position > len(self.working_copy.tasks):
            raise TaskNotFoundError(position)
        return self.working_copy.tasks[position - 1]

    def begin_editing(self) -> None:
        self._ensure_open()
        self._is_editing = True

    def set_title(self, title: str) -> None:
        self._ensure_editing()
        self.working_copy.title = title

    def set_date(self, date: datetime) -> None:
        self._ensure_editing()
        if date.tzinfo is not None:
            # stored dates are naive local time
            date = date.astimezone().replace(tzinfo=None)
        self.working_copy.date = date

    def set_symbol(self, symbol: str) -> None:
        self._ensure_editing()
        self.working_copy.symbol = EventSymbols.validate(symbol)

    def set_color(self, color: str) -> None:
        self._ensure_editing()
        if not isinstance(color, ColorOption):
            color = ColorOptions.parse(color)
        self.working_copy.color = color

    def add_task(self, text: str = "") -> EventTask:
        """Append a task flagged as new; allowed in view mode too."""
        self._ensure_open()
        task = EventTask(text=text, is_new=True)
        self.working_copy.tasks.append(task)
        return task

    def set_task_text(self, position: int, text: str) -> None:
        """Set a task's text. New tasks can be typed into outside editing mode."""
        self._ensure_open()
        task = self._task_at(position)
        if not task.is_new and not self.is_editing:
            raise NotEditingError()
        task.text = text
        task.is_new = False

    def remove_task(self, position: int) -> EventTask:
        self._ensure_editing()
        self._task_at(position)
        return self.working_copy.tasks.pop(position - 1)

    def toggle_task(self, position: int) -> bool:
        """Flip a task's completion flag on the copy and return the new value."""
        self._ensure_open()
        task = self._task_at(position)
        task.is_completed = not task.is_completed
        return task.is_completed

    def primary_action(self) -> bool:
        """Press the toolbar button (Add / Edit / Done).

        Returns:
            True if the store was written to
        """
        if self.is_new:
            return self.commit()
        if not self.is_editing:
            self.begin_editing()
            return False
        saved = self.commit()
        self._is_editing = False
        return saved

    def commit(self) -> bool:
        """Write the working copy back into the store.

        A new event is appended and the session closes; an existing one
        overwrites the entry with the same id. Returns False, leaving the
        store untouched, when that entry has been deleted meanwhile.
        """
        if self.is_closed:
            return False
        if self.is_new:
            self.store.add(self.working_copy.working_copy())
            self.is_closed = True
            logger.info(f"Added new event {self.working_copy.title!r}")
            return True
        if self.is_event_deleted:
            logger.warning(f"Not saving {self.working_copy.title!r}, it was deleted")
            return False
        logger.info(f"Done, saving any changes to {self.working_copy.title!r}")
        return self.store.update(self.working_copy.working_copy())

    def cancel(self) -> None:
        """Discard the working copy; the store is not touched."""
        self.is_closed = True
        self._is_editing = False

    def delete_event(self) -> None:
        """Remove the underlying event from the store and close the session."""
        self.is_closed = True
        self._is_editing = False
        if not self.is_new:
            self.store.delete(self.working_copy)
