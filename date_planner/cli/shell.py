"""Interactive single-window planner session."""

import logging
import random
from datetime import datetime
from typing import Callable, Dict, List, Optional

from rich.console import Console
from rich.markup import escape

from date_planner.core.planner_core.config import PlannerConfig
from date_planner.core.planner_core.editor import EditSession
from date_planner.core.planner_core.errors import PlannerError
from date_planner.core.planner_core.events import Event, EventStore

from .render import render_event_detail, render_event_list

logger = logging.getLogger(__name__)

HELP_TEXT = """\
List:    list | open N | new | rm N | help | quit
Detail:  edit | done | add | cancel | close | delete
         title TEXT | date YYYY-MM-DD HH:MM | symbol NAME | color NAME
         task add [TEXT] | task text N TEXT | task rm N | task toggle N"""


class PlannerShell:
    """Read-eval loop over one store, with a list pane and a detail pane.

    List commands work while an event is open, so an event can be removed
    from the list under an open editor; the detail pane then shows the
    deleted placeholder and refuses edits.
    """

    def __init__(
        self,
        store: EventStore,
        console: Console,
        config: Optional[PlannerConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.store = store
        self.console = console
        self.config = config or PlannerConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.session: Optional[EditSession] = None
        self.visible: List[Event] = []
        self.running = False
        self._needs_refresh = True
        self._unsubscribe = store.subscribe(self._on_store_change)

        self._commands: Dict[str, Callable[[str], None]] = {
            "list": self._cmd_list,
            "ls": self._cmd_list,
            "open": self._cmd_open,
            "new": self._cmd_new,
            "rm": self._cmd_rm,
            "help": self._cmd_help,
            "quit": self._cmd_quit,
            "exit": self._cmd_quit,
            "edit": self._cmd_primary,
            "done": self._cmd_primary,
            "add": self._cmd_primary,
            "cancel": self._cmd_cancel,
            "close": self._cmd_close,
            "delete": self._cmd_delete,
            "title": self._cmd_title,
            "date": self._cmd_date,
            "symbol": self._cmd_symbol,
            "color": self._cmd_color,
            "task": self._cmd_task,
        }

    def _on_store_change(self, change_type: str, event: Event) -> None:
        logger.debug(f"Store changed ({change_type}), list needs refresh")
        self._needs_refresh = True

    def run(self) -> None:
        """Loop until quit or end of input."""
        self.running = True
        self.refresh()
        try:
            while self.running:
                try:
                    line = self.console.input("[bold cyan]planner>[/bold cyan] ")
                except EOFError:
                    break
                self.execute(line)
        finally:
            self._unsubscribe()
        self.console.print("👋 Bye", style="dim")

    def execute(self, line: str) -> None:
        """Run one command line and redraw whatever changed."""
        line = line.strip()
        if not line:
            return
        name, _, argument = line.partition(" ")
        handler = self._commands.get(name.lower())
        if handler is None:
            self.console.print(f"❌ Unknown command: {escape(name)}", style="red")
            self.console.print("💡 Type 'help' for commands", style="dim")
            return

        try:
            handler(argument.strip())
        except PlannerError as e:
            self.console.print(f"❌ {escape(e.message)}", style="red")
        except ValueError as e:
            self.console.print(f"❌ {escape(str(e))}", style="red")

        if self._needs_refresh:
            self.refresh()

    def refresh(self) -> None:
        """Redraw the list from a fresh projection."""
        self.visible = render_event_list(
            self.store, self.console, date_format=self.config.date_format
        )
        self._needs_refresh = False

    def show_detail(self) -> None:
        render_event_detail(self.session, self.console, date_format=self.config.date_format)

    def _require_session(self) -> EditSession:
        if self.session is None:
            raise ValueError("No event is open, use 'open N' or 'new'")
        return self.session

    def _event_at(self, argument: str) -> Event:
        if not argument.isdigit():
            raise ValueError("Expected an event number from the list")
        position = int(argument)
        if position < 1 or position > len(self.visible):
            raise ValueError(f"No event number {position} in the list")
        return self.visible[position - 1]

    # List commands

    def _cmd_list(self, argument: str) -> None:
        self._needs_refresh = True

    def _cmd_open(self, argument: str) -> None:
        event = self._event_at(argument)
        self.session = EditSession(self.store, event)
        self.show_detail()

    def _cmd_new(self, argument: str) -> None:
        self.session = EditSession(self.store, Event.blank(rng=self.rng), is_new=True)
        self.show_detail()

    def _cmd_rm(self, argument: str) -> None:
        event = self._event_at(argument)
        self.store.delete(event)
        self.console.print(f"🗑  Deleted: {escape(event.title)}", style="yellow")
        if self.session is not None and self.session.event_id == event.id:
            self.show_detail()

    def _cmd_help(self, argument: str) -> None:
        self.console.print(HELP_TEXT, markup=False)

    def _cmd_quit(self, argument: str) -> None:
        self.running = False

    # Detail commands

    def _cmd_primary(self, argument: str) -> None:
        session = self._require_session()
        if session.is_event_deleted:
            self.show_detail()
            return
        saved = session.primary_action()
        if session.is_new and saved:
            self.console.print(f"✓ Added: {escape(session.working_copy.title)}", style="green")
            self.session = None
            return
        if saved:
            self.console.print("✓ Saved", style="green")
        self.show_detail()

    def _cmd_cancel(self, argument: str) -> None:
        session = self._require_session()
        session.cancel()
        if session.is_new or session.is_event_deleted:
            self.session = None
            self.show_detail()
            return
        # Reopen in view mode from the stored version
        self.session = EditSession(self.store, self.store.get(session.event_id))
        self.show_detail()

    def _cmd_close(self, argument: str) -> None:
        if self.session is not None:
            self.session.cancel()
        self.session = None
        self.show_detail()

    def _cmd_delete(self, argument: str) -> None:
        session = self._require_session()
        if session.is_new:
            raise ValueError("A new event is not in the list yet, use 'cancel'")
        if not session.is_editing:
            raise ValueError("Press 'edit' before deleting this event")
        session.delete_event()
        self.session = None
        self.console.print(f"🗑  Deleted: {escape(session.working_copy.title)}", style="yellow")

    def _cmd_title(self, argument: str) -> None:
        self._require_session().set_title(argument)
        self.show_detail()

    def _cmd_date(self, argument: str) -> None:
        session = self._require_session()
        try:
            moment = datetime.fromisoformat(argument)
        except ValueError:
            raise ValueError(f"Cannot read date '{argument}', use YYYY-MM-DD HH:MM") from None
        session.set_date(moment)
        self.show_detail()

    def _cmd_symbol(self, argument: str) -> None:
        self._require_session().set_symbol(argument)
        self.show_detail()

    def _cmd_color(self, argument: str) -> None:
        self._require_session().set_color(argument)
        self.show_detail()

    def _cmd_task(self, argument: str) -> None:
        session = self._require_session()
        action, _, rest = argument.partition(" ")
        action = action.lower()

        if action == "add":
            task = session.add_task()
            if rest:
                session.set_task_text(len(session.working_copy.tasks), rest)
            logger.debug(f"Added task {task.id}")
        elif action in ("text", "rm", "toggle"):
            position_text, _, text = rest.partition(" ")
            if not position_text.isdigit():
                raise ValueError(f"Usage: task {action} N")
            position = int(position_text)
            if action == "text":
                session.set_task_text(position, text)
            elif action == "rm":
                session.remove_task(position)
            else:
                session.toggle_task(position)
        else:
            raise ValueError("Usage: task add|text|rm|toggle ...")

        self.show_detail()
