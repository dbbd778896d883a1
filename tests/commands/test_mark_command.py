"""Unit tests for the 'mark-in-progress' and 'mark-done' commands."""

from __future__ import annotations

from typer.testing import CliRunner

from tasktracker_cli.main import app
from tasktracker_cli.utils.exit_codes import ERROR_NOT_FOUND

runner = CliRunner()


def test_mark_in_progress(read_tasks_file):
    runner.invoke(app, ["add", "buy milk"])
    result = runner.invoke(app, ["mark-in-progress", "1"])
    assert result.exit_code == 0, result.output
    assert "Task marked as in-progress successfully (ID: 1)" in result.output
    assert read_tasks_file()[0]["status"] == "in-progress"


def test_mark_done_straight_from_todo(read_tasks_file):
    runner.invoke(app, ["add", "buy milk"])
    result = runner.invoke(app, ["mark-done", "1"])
    assert result.exit_code == 0, result.output
    assert "Task marked as done successfully (ID: 1)" in result.output
    assert read_tasks_file()[0]["status"] == "done"


def test_mark_in_progress_then_done(read_tasks_file):
    runner.invoke(app, ["add", "buy milk"])
    runner.invoke(app, ["mark-in-progress", "1"])
    runner.invoke(app, ["mark-done", "1"])
    assert read_tasks_file()[0]["status"] == "done"


def test_mark_unknown_id():
    runner.invoke(app, ["add", "buy milk"])
    result = runner.invoke(app, ["mark-done", "3"])
    assert result.exit_code == ERROR_NOT_FOUND
    assert "Task not found (ID: 3)" in result.output
