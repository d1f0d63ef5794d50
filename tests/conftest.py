"""Shared fixtures for taskman tests."""

from __future__ import annotations

import json
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from taskman.models import Priority, Task
from taskman.store import TaskStore


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def sample_tasks_data() -> list[dict]:
    """Sample persisted task data."""
    return [
        {
            "name": "Buy milk",
            "description": "2% milk",
            "priority": "Low",
            "date_created": "2025-01-10T10:00:00",
            "date_updated": None,
        },
        {
            "name": "Fix bug",
            "description": "null pointer",
            "priority": "High",
            "date_created": "2025-01-10T10:05:00",
            "date_updated": "2025-01-11T09:00:00",
        },
    ]


@pytest.fixture
def sample_tasks_file(temp_project: Path, sample_tasks_data: list[dict]) -> Path:
    """Create a sample tasks.json file."""
    tasks_path = temp_project / "tasks.json"
    with open(tasks_path, "w") as f:
        json.dump(sample_tasks_data, f)
    return tasks_path


@pytest.fixture
def store() -> TaskStore:
    """A store holding three tasks."""
    store = TaskStore()
    store.add(Task(name="Buy milk", description="2% milk", priority=Priority.LOW))
    store.add(Task(name="Fix bug", description="null pointer", priority=Priority.HIGH))
    store.add(Task(name="Write docs", description="README", priority=Priority.MEDIUM))
    return store
