import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from date_planner.core.planner_core.config import load_config

from .commands.core import colors, list_events, shell, show, symbols

app = typer.Typer(help="Date Planner - events and their checklists")


def configure_logging(level: int) -> None:
    """Send package log records to stderr through rich."""
    package_logger = logging.getLogger("date_planner")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Date Planner - events and their checklists."""
    if verbose:
        configure_logging(logging.DEBUG)
    else:
        level = logging.getLevelName(load_config().log_level)
        configure_logging(level if isinstance(level, int) else logging.WARNING)


@app.command()
def hello() -> None:
    """Sanity check command."""
    typer.echo("Date Planner is ready.")

app.command(name="list")(list_events)  # "list" is a Python builtin, so use name mapping
app.command()(show)
app.command()(symbols)
app.command()(colors)
app.command()(shell)

# Entry point function for the CLI script
def cli() -> None:
    app()
