"""Unit tests for main.py, the CLI entry point.

Tests focus on:
- --help flags work for top-level and sub-commands
- Every task command is registered
- main() and version work
- A full add / mark / list session through the CLI
"""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tasktracker_cli import __version__
from tasktracker_cli.main import app, main

runner = CliRunner()

TASK_COMMANDS = ["add", "update", "delete", "mark-in-progress", "mark-done", "list"]


def _invoke(*args):
    return runner.invoke(app, list(args))


class TestHelp:
    def test_help_flag_exits_zero(self):
        result = _invoke("--help")
        assert result.exit_code == 0
        for command in TASK_COMMANDS:
            assert command in result.output

    def test_no_args_shows_help(self):
        result = _invoke()
        assert "Usage" in result.output

    @pytest.mark.parametrize("command", TASK_COMMANDS + ["config", "version"])
    def test_subcommand_help(self, command):
        result = _invoke(command, "--help")
        assert result.exit_code == 0, result.output


def test_version_command():
    result = _invoke("version")
    assert result.exit_code == 0
    assert __version__ in result.output


def test_main_invokes_app():
    with patch("tasktracker_cli.main.app") as mock_app:
        main()
    mock_app.assert_called_once_with()


def test_buy_milk_session():
    assert "Task added successfully (ID: 1)" in _invoke("add", "buy milk").output
    assert "Task added successfully (ID: 2)" in _invoke("add", "clean house").output
    assert _invoke("mark-done", "1").exit_code == 0

    done = json.loads(_invoke("list", "done").output)
    todo = json.loads(_invoke("list", "todo").output)

    assert [(t["id"], t["status"]) for t in done] == [(1, "done")]
    assert [(t["id"], t["name"]) for t in todo] == [(2, "clean house")]


def test_env_var_selects_task_file(monkeypatch, isolated_env):
    monkeypatch.setenv("TASK_CLI_FILE", str(isolated_env / "env.json"))
    assert _invoke("add", "from env").exit_code == 0
    assert (isolated_env / "env.json").exists()
