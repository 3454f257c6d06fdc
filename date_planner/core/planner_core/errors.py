"""Domain error codes for Date Planner."""

from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    EVENT_DELETED = "EVENT_DELETED"
    NOT_EDITING = "NOT_EDITING"
    UNKNOWN_COLOR = "UNKNOWN_COLOR"
    UNKNOWN_SYMBOL = "UNKNOWN_SYMBOL"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    SESSION_CLOSED = "SESSION_CLOSED"


class PlannerError(Exception):
    """Base domain error with code and user-safe message."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(PlannerError):
    """Raised when a lookup by title or id matches no event."""

    def __init__(self, query: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"No event matches '{query}'",
        )
        self.query = query


class EventDeletedError(PlannerError):
    """Raised when editing an event that is no longer in the store."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DELETED,
            message="Event Deleted. Select an Event.",
        )
        self.event_id = event_id


class NotEditingError(PlannerError):
    """Raised when a field edit is attempted outside editing mode."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_EDITING,
            message="Press Edit before changing this event",
        )


class UnknownColorError(PlannerError):
    """Raised when a color name is not in the palette."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_COLOR,
            message=f"Unknown color: {name}",
        )
        self.name = name


class UnknownSymbolError(PlannerError):
    """Raised when a symbol name is not in the catalog."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.UNKNOWN_SYMBOL,
            message=f"Unknown symbol: {name}",
        )
        self.name = name


class TaskNotFoundError(PlannerError):
    """Raised when a task position does not exist on the working copy."""

    def __init__(self, position: int) -> None:
        super().__init__(
            code=ErrorCode.TASK_NOT_FOUND,
            message=f"No task at position {position}",
        )
        self.position = position


class SessionClosedError(PlannerError):
    """Raised when a cancelled, committed or deleted session is edited."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SESSION_CLOSED,
            message="This editor is closed, open the event again",
        )
