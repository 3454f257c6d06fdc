"""Tests for the main CLI application."""

import pytest
from typer.testing import CliRunner

from date_planner.cli.planner import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point configuration at an empty location."""
    monkeypatch.setenv("DATE_PLANNER_CONFIG", str(tmp_path / "config.json"))
    monkeypatch.delenv("DATE_PLANNER_SAMPLE_DATA", raising=False)
    monkeypatch.delenv("DATE_PLANNER_SEED", raising=False)


def test_cli_help():
    """Test that CLI help shows proper information."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Date Planner" in result.stdout
    assert "list" in result.stdout
    assert "shell" in result.stdout


def test_hello_command():
    """Test hello command executes successfully."""
    result = runner.invoke(app, ["hello"])
    assert result.exit_code == 0
    assert "Date Planner is ready." in result.stdout


def test_list_command_shows_sections():
    """Test list renders the sample events by period."""
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Next 7 Days" in result.stdout
    assert "Pagliacci" in result.stdout
    assert "Past" in result.stdout
    assert "WWDC" in result.stdout


def test_list_without_sample_data(monkeypatch):
    """Test list on an empty store."""
    monkeypatch.setenv("DATE_PLANNER_SAMPLE_DATA", "false")
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "No events yet" in result.stdout


def test_show_command():
    """Test show finds an event by title text."""
    result = runner.invoke(app, ["show", "pagliacci"])
    assert result.exit_code == 0
    assert "Buy new tux" in result.stdout
    assert "Get tickets" in result.stdout


def test_show_unknown_event():
    """Test show reports a missing event."""
    result = runner.invoke(app, ["show", "no such event"])
    assert result.exit_code == 1
    assert "No event matches" in result.stdout


def test_symbols_search():
    """Test symbols filters by name."""
    result = runner.invoke(app, ["symbols", "--search", "heart"])
    assert result.exit_code == 0
    assert "heart.fill" in result.stdout
    assert "airplane" not in result.stdout


def test_colors_command():
    """Test colors lists the palette."""
    result = runner.invoke(app, ["colors"])
    assert result.exit_code == 0
    for name in ("primary", "mint", "indigo", "purple"):
        assert name in result.stdout


def test_shell_adds_event():
    """Test a scripted shell session adding one event."""
    script = "\n".join([
        "new",
        "title Picnic",
        "date 2099-05-01 12:00",
        "task text 1 Blanket",
        "add",
        "quit",
    ]) + "\n"
    result = runner.invoke(app, ["shell", "--empty", "--seed", "1"], input=script)

    assert result.exit_code == 0
    assert "Added: Picnic" in result.stdout
    assert "Future" in result.stdout
    assert "Bye" in result.stdout


def test_shell_ends_on_end_of_input():
    """Test the shell exits cleanly when input runs out."""
    result = runner.invoke(app, ["shell"], input="list\n")
    assert result.exit_code == 0
    assert "Bye" in result.stdout


def test_list_with_non_object_config(tmp_path, monkeypatch):
    """Test a config file holding a JSON list does not break commands."""
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    monkeypatch.setenv("DATE_PLANNER_CONFIG", str(path))

    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    assert "Next 7 Days" in result.stdout
