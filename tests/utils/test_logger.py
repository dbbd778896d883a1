"""Tests for the application logger utility."""

from __future__ import annotations

import logging
import logging.handlers

from tasktracker_cli.utils.logger import get_logger


def test_get_logger_creates_log_file(tmp_path):
    """Logger creates the log file inside user_log_dir."""
    logger = get_logger()

    assert (tmp_path / "logs" / "tasktracker.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_returns_singleton():
    """Repeated calls return the same logger instance."""
    assert get_logger() is get_logger()


def test_get_logger_does_not_propagate():
    assert get_logger().propagate is False


def test_module_loggers_reach_log_file(tmp_path):
    """Records from package modules land in the application log file."""
    logger = get_logger()
    logging.getLogger("tasktracker_cli.adapters.json_file.task_repository").info(
        "hello from a module"
    )

    for handler in logger.handlers:
        handler.flush()

    content = (tmp_path / "logs" / "tasktracker.log").read_text(encoding="utf-8")
    assert "hello from a module" in content
    assert "[tasktracker_cli.adapters.json_file.task_repository]" in content


def test_file_handler_added_alongside_foreign_handlers(tmp_path):
    """A handler attached by someone else does not stop us logging to file."""
    app_logger = logging.getLogger("tasktracker_cli")
    foreign = logging.NullHandler()
    app_logger.addHandler(foreign)
    try:
        logger = get_logger()
        logger.info("task file created")
        for handler in logger.handlers:
            handler.flush()

        assert foreign in logger.handlers
        assert sum(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in logger.handlers
        ) == 1
        content = (tmp_path / "logs" / "tasktracker.log").read_text(encoding="utf-8")
        assert "task file created" in content
    finally:
        app_logger.removeHandler(foreign)
