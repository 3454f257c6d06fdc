"""Event and task records for Date Planner."""

import random
from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from ..catalog import ColorOption, ColorOptions, EventSymbols
from . import periods
from .periods import Period


class EventTask(BaseModel):
    """A checklist item belonging to exactly one event."""

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, frozen=True)
    text: str
    is_completed: bool = False
    is_new: bool = False  # just created in the editor, not yet typed into

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EventTask):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


def _default_tasks() -> List[EventTask]:
    return [EventTask(text="")]


class Event(BaseModel):
    """A dated item with a title, symbol, color, and an ordered task list.

    Identity is the `id` field: two events with the same id compare equal
    regardless of their other fields. Time-window predicates take an
    explicit `now` so that callers can evaluate several of them against a
    single snapshot; omitting it reads the clock.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: UUID = Field(default_factory=uuid4, frozen=True)
    symbol: str = Field(default_factory=EventSymbols.random_name)
    color: ColorOption = Field(default_factory=ColorOptions.random)
    title: str = ""
    tasks: List[EventTask] = Field(default_factory=_default_tasks)
    date: datetime = Field(default_factory=datetime.now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @classmethod
    def blank(
        cls,
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ) -> "Event":
        """Create a new untitled event with a random symbol and color."""
        return cls(
            symbol=EventSymbols.random_name(rng),
            color=ColorOptions.random(rng),
            date=now or datetime.now(),
        )

    def working_copy(self) -> "Event":
        """Deep copy (same ids) for editing without touching the original."""
        return self.model_copy(deep=True)

    @property
    def remaining_task_count(self) -> int:
        return len([task for task in self.tasks if not task.is_completed])

    @property
    def is_complete(self) -> bool:
        return all(task.is_completed for task in self.tasks)

    def is_past(self, now: Optional[datetime] = None) -> bool:
        return periods.is_past(self.date, now or datetime.now())

    def is_within_seven_days(self, now: Optional[datetime] = None) -> bool:
        return periods.is_within_seven_days(self.date, now or datetime.now())

    def is_within_seven_to_thirty_days(self, now: Optional[datetime] = None) -> bool:
        return periods.is_within_seven_to_thirty_days(self.date, now or datetime.now())

    def is_distant(self, now: Optional[datetime] = None) -> bool:
        return periods.is_distant(self.date, now or datetime.now())

    def period(self, now: Optional[datetime] = None) -> Period:
        """The one period this event currently belongs to."""
        return periods.classify(self.date, now or datetime.now())
