"""Configuration models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

IdStrategy = Literal["max", "length"]
OutputFormat = Literal["json", "pretty", "table", "yaml"]


class StorageConfig(BaseModel):
    """Task file configuration."""

    file: str = Field(default="tasks.json", description="Task file path")
    id_strategy: IdStrategy = Field(
        default="max",
        description=(
            "'max' assigns max(existing ids) + 1; "
            "'length' assigns len(tasks) + 1 like older task files expect"
        ),
    )


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = Field(default="json")


class Config(BaseModel):
    """Main configuration."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
