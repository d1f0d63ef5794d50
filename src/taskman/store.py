"""Task store - ordered, name-keyed task collection with JSON file persistence.

Tasks keep their insertion order, which is also the display order. Saving
writes the whole collection as one JSON array; loading replaces the whole
collection with the file's contents.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from pathlib import Path

from pydantic import ValidationError

from taskman.errors import (
    FileAlreadyExistsError,
    TaskFileIOError,
    TaskFileNotFoundError,
    TaskFileParseError,
    TaskNotFoundError,
)
from taskman.models import Priority, Task, TaskList

logger = logging.getLogger(__name__)


class TaskStore:
    """In-memory task collection.

    Names are looked up exactly (case-sensitive). The store itself does not
    reject duplicate names; callers that need unique names check
    `find_index` first.
    """

    def __init__(self, tasks: list[Task] | None = None) -> None:
        self._tasks: list[Task] = list(tasks) if tasks else []

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.enumerate())

    def add(self, task: Task) -> None:
        """Append a task to the end of the collection."""
        self._tasks.append(task)
        logger.debug("Added task %r (total=%d)", task.name, len(self._tasks))

    def find_index(self, name: str) -> int | None:
        """Return the position of the first task named `name`, or None."""
        for i, task in enumerate(self._tasks):
            if task.name == name:
                return i
        return None

    def find(self, name: str) -> Task | None:
        """Return the first task named `name`, or None."""
        i = self.find_index(name)
        return self._tasks[i] if i is not None else None

    def remove(self, name: str) -> str:
        """Remove the first task named `name`.

        Raises:
            TaskNotFoundError: If no task has that name.
        """
        i = self.find_index(name)
        if i is None:
            raise TaskNotFoundError(name)

        del self._tasks[i]
        logger.debug("Removed task %r (total=%d)", name, len(self._tasks))
        return f'Task "{name}" removed'

    def edit(
        self,
        name: str,
        new_name: str,
        new_description: str,
        new_priority: Priority,
    ) -> str:
        """Overwrite a task's fields in place and stamp its update time.

        The creation time is left alone.

        Raises:
            TaskNotFoundError: If no task has that name. The store is unchanged.
        """
        i = self.find_index(name)
        if i is None:
            raise TaskNotFoundError(name)

        task = self._tasks[i]
        task.name = new_name
        task.description = new_description
        task.priority = new_priority
        task.touch()
        logger.debug("Edited task %r -> %r", name, new_name)
        return f'Task "{new_name}" updated'

    def enumerate(self) -> list[Task]:
        """Return the tasks in display order."""
        return list(self._tasks)

    def serialize_to_file(self, path: str | Path) -> str:
        """Write every task to a new JSON file.

        Raises:
            FileAlreadyExistsError: If something already exists at `path`.
            TaskFileIOError: If the file cannot be created or written.
        """
        path = Path(path)
        if path.exists():
            raise FileAlreadyExistsError(path)

        data = TaskList.dump_python(self._tasks, mode="json")
        try:
            # "x" refuses to open a file that appeared after the check above
            with open(path, "x", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except FileExistsError as e:
            raise FileAlreadyExistsError(path) from e
        except OSError as e:
            raise TaskFileIOError(path, e.strerror or str(e)) from e

        logger.info("Saved %d task(s) to %s", len(self._tasks), path)
        return f"Saved {_plural(len(self._tasks))} to {path}"

    def deserialize_from_file(self, path: str | Path) -> str:
        """Replace every task with the contents of a JSON file.

        The file is fully parsed before anything is replaced, so a failed
        load leaves the store as it was.

        Raises:
            TaskFileNotFoundError: If nothing exists at `path`.
            TaskFileIOError: If the file cannot be read.
            TaskFileParseError: If the file is not a valid task document.
        """
        path = Path(path)
        if not path.exists():
            raise TaskFileNotFoundError(path)

        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise TaskFileParseError(path, str(e)) from e
        except OSError as e:
            raise TaskFileIOError(path, e.strerror or str(e)) from e

        try:
            tasks = TaskList.validate_python(data)
        except ValidationError as e:
            raise TaskFileParseError(path, _describe(e)) from e

        self._tasks = tasks
        logger.info("Loaded %d task(s) from %s", len(tasks), path)
        return f"Loaded {_plural(len(tasks))} from {path}"


def _plural(count: int) -> str:
    return f"{count} task" if count == 1 else f"{count} tasks"


def _describe(error: ValidationError) -> str:
    """Summarise a validation error on one line."""
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "document"
    return f"{location}: {first['msg']} ({error.error_count()} error(s))"
