"""Configuration models for taskman."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from taskman.models import DEFAULT_DATE_FORMAT


class StorageConfig(BaseModel):
    """Configuration for task files."""

    data_file: str = "tasks.json"


class DisplayConfig(BaseModel):
    """Configuration for how tasks are printed."""

    date_format: str = DEFAULT_DATE_FORMAT


class LoggingConfig(BaseModel):
    """Configuration for diagnostic logging."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    file: str | None = None


class TaskmanConfig(BaseModel):
    """Main configuration for taskman."""

    storage: StorageConfig = Field(default_factory=StorageConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> TaskmanConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
TASKMAN_DIR = Path(".taskman")
CONFIG_FILE = TASKMAN_DIR / "config.json"
