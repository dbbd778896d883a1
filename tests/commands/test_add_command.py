"""Unit tests for the 'add' command."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from tasktracker_cli.main import app
from tasktracker_cli.models import StoreReadWriteError
from tasktracker_cli.utils.exit_codes import ERROR_STORAGE

runner = CliRunner()


def test_add_prints_confirmation(read_tasks_file):
    result = runner.invoke(app, ["add", "buy milk"])
    assert result.exit_code == 0, result.output
    assert "Task added successfully (ID: 1)" in result.output
    assert read_tasks_file()[0]["name"] == "buy milk"


def test_add_assigns_sequential_ids():
    runner.invoke(app, ["add", "buy milk"])
    result = runner.invoke(app, ["add", "clean house"])
    assert "Task added successfully (ID: 2)" in result.output


def test_add_requires_description():
    result = runner.invoke(app, ["add"])
    assert result.exit_code == 2


def test_add_with_file_option(isolated_env):
    target = isolated_env / "work.json"
    result = runner.invoke(app, ["--file", str(target), "add", "write report"])
    assert result.exit_code == 0, result.output
    assert target.exists()
    assert not (isolated_env / "tasks.json").exists()


def test_add_storage_failure_exits_with_storage_code():
    svc = MagicMock()
    svc.add_task.side_effect = StoreReadWriteError("Error adding task")
    with patch("tasktracker_cli.commands.add_command.get_task_service", return_value=svc):
        result = runner.invoke(app, ["add", "buy milk"])
    assert result.exit_code == ERROR_STORAGE
    assert "Error adding task" in result.output


def test_add_on_corrupt_file(tasks_file):
    tasks_file.write_text("oops", encoding="utf-8")
    result = runner.invoke(app, ["add", "buy milk"])
    assert result.exit_code == ERROR_STORAGE
    assert "Error adding task" in result.output
