"""Core commands for Date Planner."""

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from date_planner.core.planner_core.catalog import ColorOptions, EventSymbols
from date_planner.core.planner_core.config import PlannerConfig, load_config
from date_planner.core.planner_core.editor import EditSession
from date_planner.core.planner_core.errors import EventNotFoundError
from date_planner.core.planner_core.events import Event, EventStore
from date_planner.core.planner_core.sample_data import sample_events

from ..render import render_event_detail, render_event_list
from ..shell import PlannerShell

console = Console()
logger = logging.getLogger(__name__)


def build_store(config: PlannerConfig) -> EventStore:
    """Create the session store, seeded with sample data unless disabled."""
    events = sample_events() if config.load_sample_data else []
    logger.debug(f"Starting with {len(events)} sample events")
    return EventStore(events)


def find_event(store: EventStore, query: str) -> Event:
    """First event whose id starts with, or title contains, `query`."""
    needle = query.strip().lower()
    for event in store.events:
        if needle and str(event.id).startswith(needle):
            return event
    for event in store.events:
        if needle and needle in event.title.lower():
            return event
    raise EventNotFoundError(query)


def list_events() -> None:
    """Show events grouped into Next 7 Days, Next 30 Days, Future and Past."""
    config = load_config()
    store = build_store(config)
    render_event_list(store, console, date_format=config.date_format)


def show(query: str = typer.Argument(help="Title text or id prefix")) -> None:
    """Show one event with its tasks."""
    config = load_config()
    store = build_store(config)
    try:
        event = find_event(store, query)
    except EventNotFoundError as e:
        console.print(f"❌ {escape(e.message)}", style="red")
        raise typer.Exit(1)
    render_event_detail(EditSession(store, event), console, date_format=config.date_format)


def symbols(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter symbol names"),
) -> None:
    """List the selectable event symbols."""
    names = EventSymbols.search(search or "")
    if not names:
        console.print(f"🔍 No symbols match '{escape(search or '')}'", style="dim")
        return

    table = Table(title="Symbols", show_header=True, header_style="bold cyan")
    table.add_column("Glyph")
    table.add_column("Name")
    for name in names:
        table.add_row(EventSymbols.glyph(name), name)
    console.print(table)


def colors() -> None:
    """List the selectable event colors."""
    table = Table(title="Colors", show_header=True, header_style="bold cyan")
    table.add_column("Swatch")
    table.add_column("Name")
    for option in ColorOptions.all:
        table.add_row(Text("●", style=option.style), option.value)
    console.print(table)


def shell(
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for random symbols and colors"),
    empty: bool = typer.Option(False, "--empty", help="Start without sample events"),
) -> None:
    """Open an interactive planner session (changes last until you quit)."""
    config = load_config()
    if seed is not None:
        config.seed = seed
    if empty:
        config.load_sample_data = False

    store = build_store(config)
    PlannerShell(store, console, config=config, rng=random.Random(config.seed)).run()
