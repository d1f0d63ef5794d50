"""Errors raised by the task store."""

from __future__ import annotations

from pathlib import Path


class TaskStoreError(Exception):
    """Base class for every failure a store operation can report."""


class TaskNotFoundError(TaskStoreError):
    """No task with the requested name exists."""

    def __init__(self, name: str) -> None:
        super().__init__("Task not found")
        self.name = name


class FileAlreadyExistsError(TaskStoreError):
    """The save target is already occupied."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File already exists: {path}")
        self.path = path


class TaskFileNotFoundError(TaskStoreError):
    """The load target does not exist."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"File does not exist: {path}")
        self.path = path


class TaskFileIOError(TaskStoreError):
    """Creating, writing or reading a task file failed."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not access {path}: {reason}")
        self.path = path
        self.reason = reason


class TaskFileParseError(TaskStoreError):
    """A task file does not hold a valid task document."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason
