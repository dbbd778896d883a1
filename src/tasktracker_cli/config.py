"""Configuration management for Task Tracker CLI."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir
from pydantic import BaseModel, ValidationError

from tasktracker_cli.models.config_models import Config

logger = logging.getLogger(__name__)

# Environment variable overriding storage.file
ENV_TASKS_FILE = "TASK_CLI_FILE"


class ConfigManager:
    """Manages Task Tracker CLI configuration."""

    def __init__(self):
        self.config_dir = Path(user_config_dir("tasktracker-cli"))
        self.config_file = self.config_dir / "config.json"

        # Set from the global --file option; wins over env and config.
        self.file_override: str | None = None

        self._config: Config | None = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, encoding="utf-8") as f:
                    data = json.load(f)
                return Config(**data)
            except (OSError, ValueError, TypeError, ValidationError) as e:
                # If config is corrupted, return default
                logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
                return Config()
        return Config()

    def save_config(self, config: Config | None = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not name an existing setting
            ValidationError: If the value is not valid for the setting
        """
        if self.get(key) is None or isinstance(self.get(key), BaseModel):
            raise KeyError(key)

        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        self._config = Config(**config_dict)
        self.save_config()

    def reset(self, key: str | None = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
        else:
            default_value = self.get_from_config(Config(), key)
            if default_value is None:
                raise KeyError(key)
            self.set(key, default_value)
        self.save_config()

    def get_from_config(self, config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        keys = key.split(".")
        value: Any = config
        for k in keys:
            # Only declared settings; never pydantic attributes like model_config.
            if isinstance(value, BaseModel) and k in type(value).model_fields:
                value = getattr(value, k)
            else:
                return None
        return value

    def tasks_file(self) -> Path:
        """Resolve the task file: --file, then $TASK_CLI_FILE, then storage.file."""
        raw = self.file_override or os.environ.get(ENV_TASKS_FILE) or self.config.storage.file
        return Path(raw).expanduser()


# Global config manager instance
_config_manager: ConfigManager | None = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
