"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real filesystem: every
test runs inside its own temporary working directory, with log and config
directories redirected there as well.
"""

from __future__ import annotations

import json
import logging
import logging.handlers

import pytest

from tasktracker_cli.adapters.json_file import JsonTaskRepository


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Run each test in tmp_path with fresh logger and config singletons."""
    import tasktracker_cli.config as config_mod
    import tasktracker_cli.utils.logger as logger_mod

    work_dir = tmp_path / "work"
    work_dir.mkdir()
    monkeypatch.chdir(work_dir)
    monkeypatch.delenv(config_mod.ENV_TASKS_FILE, raising=False)

    monkeypatch.setattr(
        logger_mod, "user_log_dir", lambda *a, **k: str(tmp_path / "logs")
    )
    monkeypatch.setattr(
        config_mod, "user_config_dir", lambda *a, **k: str(tmp_path / "config")
    )
    monkeypatch.setattr(logger_mod, "_logger", None)
    monkeypatch.setattr(config_mod, "_config_manager", None)

    yield work_dir

    app_logger = logging.getLogger("tasktracker_cli")
    for handler in list(app_logger.handlers):
        if not isinstance(handler, logging.handlers.RotatingFileHandler):
            continue
        handler.close()
        app_logger.removeHandler(handler)


# ---------------------------------------------------------------------------
# Task file helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def tasks_file(isolated_env):
    """Path of the default task file inside the working directory."""
    return isolated_env / "tasks.json"


@pytest.fixture()
def repo(tasks_file):
    """A JsonTaskRepository over the default task file."""
    return JsonTaskRepository(tasks_file)


@pytest.fixture()
def read_tasks_file(tasks_file):
    """Return a callable that parses the task file as raw JSON."""

    def _read():
        return json.loads(tasks_file.read_text(encoding="utf-8"))

    return _read
