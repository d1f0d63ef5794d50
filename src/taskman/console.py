"""Interactive console menu for taskman.

All user input is read here. Each command gathers plain strings, turns them
into store calls, and prints the store's message or error before returning
to the menu. No store error ends the loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import click
from rich.console import Console
from rich.markup import escape

from taskman.config import TaskmanConfig
from taskman.errors import TaskNotFoundError, TaskStoreError
from taskman.models import Priority, TaskInput
from taskman.store import TaskStore

logger = logging.getLogger(__name__)

MENU = """\
[bold]1.[/bold] Add task
[bold]2.[/bold] Edit task
[bold]3.[/bold] Find task
[bold]4.[/bold] Remove task
[bold]5.[/bold] Print all tasks
[bold]6.[/bold] Save to file
[bold]7.[/bold] Load from file
[bold]0.[/bold] Quit"""


class ConsoleDriver:
    """Numbered command menu over a TaskStore."""

    def __init__(
        self,
        store: TaskStore,
        config: TaskmanConfig | None = None,
        console: Console | None = None,
    ) -> None:
        self.store = store
        self.config = config or TaskmanConfig()
        self.console = console or Console()
        self._commands: dict[str, Callable[[], None]] = {
            "1": self.add_task,
            "2": self.edit_task,
            "3": self.find_task,
            "4": self.remove_task,
            "5": self.print_tasks,
            "6": self.save_tasks,
            "7": self.load_tasks,
        }

    def run(self) -> None:
        """Run the menu until the user quits or input ends."""
        while True:
            self.console.print()
            self.console.print(MENU)
            try:
                choice = click.prompt("Choose", default="", show_default=False).strip()
                if choice in ("0", "q", "quit"):
                    break

                command = self._commands.get(choice)
                if command is None:
                    self.console.print(f"[red]Unknown choice:[/red] {escape(choice)}")
                    continue

                self._dispatch(command)
            except click.Abort:
                # EOF or Ctrl-C at a prompt
                self.console.print()
                break

        logger.debug("Menu closed with %d task(s) in memory", len(self.store))

    def _dispatch(self, command: Callable[[], None]) -> None:
        try:
            command()
        except TaskStoreError as e:
            logger.warning("%s failed: %s", command.__name__, e)
            self._error(str(e))

    # ---- commands ----

    def add_task(self) -> None:
        """Add a task, refusing names that are already taken."""
        task_input = self._read_task_input()
        if self.store.find_index(task_input.name) is not None:
            self._error(f'A task named "{task_input.name}" already exists')
            return

        self.store.add(task_input.to_task())
        self._ok(f'Task "{task_input.name}" added')

    def edit_task(self) -> None:
        """Edit a task's name, description and priority."""
        name = self._read_line("Name of task to edit")
        task = self.store.find(name)
        if task is None:
            raise TaskNotFoundError(name)

        defaults = TaskInput(task.name, task.description, task.priority)
        task_input = self._read_task_input(defaults=defaults)
        if task_input.name != name and self.store.find_index(task_input.name) is not None:
            self._error(f'A task named "{task_input.name}" already exists')
            return

        self._ok(
            self.store.edit(name, task_input.name, task_input.description, task_input.priority)
        )

    def find_task(self) -> None:
        """Print the task with the given name."""
        name = self._read_line("Name of task to find")
        task = self.store.find(name)
        if task is None:
            self._error("Task not found")
            return

        self._print_task_text(task.format(self.config.display.date_format))

    def remove_task(self) -> None:
        """Remove the task with the given name."""
        name = self._read_line("Name of task to remove")
        self._ok(self.store.remove(name))

    def print_tasks(self) -> None:
        """Print every task in order."""
        tasks = self.store.enumerate()
        if not tasks:
            self.console.print("[dim]No tasks.[/dim]")
            return

        for task in tasks:
            self._print_task_text(task.format(self.config.display.date_format))
            self.console.print()

    def save_tasks(self) -> None:
        """Save every task to a new file."""
        path = self._read_line("File to save to", default=self.config.storage.data_file)
        self._ok(self.store.serialize_to_file(path))

    def load_tasks(self) -> None:
        """Replace every task with the contents of a file."""
        path = self._read_line("File to load from", default=self.config.storage.data_file)
        self._ok(self.store.deserialize_from_file(path))

    # ---- input ----

    def _read_line(self, label: str, default: str | None = None) -> str:
        return click.prompt(label, default=default).strip()

    def _read_priority(self, default: Priority | None = None) -> Priority:
        while True:
            text = click.prompt(
                "Priority (Low/Medium/High)",
                default=default.value if default else None,
            )
            try:
                return Priority.parse(text)
            except ValueError as e:
                self._error(str(e))

    def _read_task_input(self, defaults: TaskInput | None = None) -> TaskInput:
        name = self._read_line("Name", default=defaults.name if defaults else None)
        description = click.prompt(
            "Description",
            default=defaults.description if defaults else "",
            show_default=defaults is not None,
        )
        priority = self._read_priority(defaults.priority if defaults else None)
        return TaskInput(name=name, description=description, priority=priority)

    # ---- output ----

    def _print_task_text(self, text: str) -> None:
        self.console.print(escape(text))

    def _ok(self, message: str) -> None:
        self.console.print(f"[green]{escape(message)}[/green]")

    def _error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")
