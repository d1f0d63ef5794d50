"""Task models.

A Task is plain data: it never reads from the console. The console driver
collects user text into a TaskInput and hands finished values to the store.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, TypeAdapter

DEFAULT_DATE_FORMAT = "%d-%m-%Y %H:%M:%S"


class Priority(str, Enum):
    """Task urgency. The value is both the display text and the stored form."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, text: str) -> Priority:
        """Map console input to a priority.

        Accepts the names in any case, their first letter, or 1-3
        (1 = Low, 3 = High).
        """
        key = text.strip().lower()
        if key in ("low", "l", "1"):
            return cls.LOW
        elif key in ("medium", "m", "2"):
            return cls.MEDIUM
        elif key in ("high", "h", "3"):
            return cls.HIGH
        raise ValueError(f"Unknown priority: {text!r} (expected Low, Medium or High)")


class Task(BaseModel):
    """One to-do item."""

    name: str
    description: str
    priority: Priority
    date_created: datetime = Field(default_factory=datetime.now)
    date_updated: datetime | None = None

    def touch(self) -> None:
        """Record an edit at the current time."""
        self.date_updated = datetime.now()

    def format(self, date_format: str = DEFAULT_DATE_FORMAT) -> str:
        """Render the task for the console."""
        lines = [f"{self.name} | {self.priority} | {self.date_created.strftime(date_format)}"]
        if self.date_updated is not None:
            lines.append(f"Updated: {self.date_updated.strftime(date_format)}")
        lines.append(self.description)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


TaskList = TypeAdapter(list[Task])


@dataclass
class TaskInput:
    """User-supplied fields for a new or edited task."""

    name: str
    description: str
    priority: Priority

    def to_task(self) -> Task:
        """Create a new task stamped with the current time."""
        return Task(name=self.name, description=self.description, priority=self.priority)
