"""Rich rendering of the event list and event detail panes."""

from datetime import datetime
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from date_planner.core.planner_core.catalog import EventSymbols
from date_planner.core.planner_core.config import PlannerConfig
from date_planner.core.planner_core.editor import EditSession
from date_planner.core.planner_core.events import Event, EventStore

DELETED_PLACEHOLDER = "Event Deleted. Select an Event."
EMPTY_DETAIL = "Select an Event"


def format_date(moment: datetime, date_format: str = PlannerConfig.date_format) -> str:
    return moment.strftime(date_format)


def render_event_list(
    store: EventStore,
    console: Console,
    now: Optional[datetime] = None,
    date_format: str = PlannerConfig.date_format,
) -> List[Event]:
    """Print one table per non-empty period.

    Returns:
        Events in the order they were numbered on screen
    """
    console.print("📅 Date Planner", style="bold blue")

    sections = store.sections(now)
    if not sections:
        console.print("• No events yet", style="dim")
        console.print("💡 Try: new", style="dim")
        return []

    numbered: List[Event] = []
    for period, events in sections:
        table = Table(
            title=period.display_name,
            title_justify="left",
            title_style="bold",
            show_header=False,
            box=None,
            padding=(0, 1),
        )
        table.add_column("#", style="dim", justify="right")
        table.add_column("Symbol")
        table.add_column("Event")
        table.add_column("Open", justify="right")

        for event in events:
            numbered.append(event)
            label = Text(event.title or "New Event", style="bold")
            label.append(f"\n{format_date(event.date, date_format)}", style="dim")
            badge = "✓" if event.is_complete else str(event.remaining_task_count)
            table.add_row(
                str(len(numbered)),
                Text(EventSymbols.glyph(event.symbol), style=event.color.style),
                label,
                badge,
            )

        console.print(table)
        console.print()

    return numbered


def render_event_detail(
    session: Optional[EditSession],
    console: Console,
    date_format: str = PlannerConfig.date_format,
) -> None:
    """Print the detail pane for the open session (or a placeholder)."""
    if session is None:
        console.print(EMPTY_DETAIL, style="dim")
        return
    if session.is_event_deleted:
        console.print(Panel(Text(DELETED_PLACEHOLDER, style="dim"), border_style="red"))
        return

    event = session.working_copy
    body = Text()
    body.append(f"{EventSymbols.glyph(event.symbol)} ", style=event.color.style)
    body.append(event.title or "New Event", style="bold")
    body.append(f"\n{format_date(event.date, date_format)}\n\n", style="dim")
    body.append("Tasks\n", style="bold")
    if not event.tasks:
        body.append("  (none)\n", style="dim")
    for position, task in enumerate(event.tasks, start=1):
        marker = "◉" if task.is_completed else "○"
        text = task.text or ("Task description" if session.is_editing or task.is_new else "")
        body.append(f"  {position}. {marker} {text}\n", style="dim" if not task.text else "")

    mode = "editing" if session.is_editing else "viewing"
    console.print(
        Panel(
            body,
            title=Text(f"{event.symbol} · {event.color.value}"),
            subtitle=Text(f"[{session.action_label}] {mode}"),
            border_style=event.color.style,
        )
    )
