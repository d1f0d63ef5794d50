"""CLI interface for taskman."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from taskman import __version__
from taskman.config import CONFIG_FILE, TaskmanConfig
from taskman.logging_setup import setup_logging

console = Console()

PRIORITY_STYLES = {
    "Low": "dim",
    "Medium": "yellow",
    "High": "bold red",
}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="taskman")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {CONFIG_FILE})",
)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """taskman - a console task tracker.

    Run without a command to open the interactive menu.

    \b
    Examples:
      taskman                # Open the menu
      taskman show tasks.json
      taskman config --init  # Write the default config
    """
    try:
        config = TaskmanConfig.load(config_path)
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        console.print(f"[red]Invalid config file {escape(str(config_path or CONFIG_FILE))}:[/red]")
        console.print(escape(str(e)))
        ctx.exit(1)

    setup_logging(
        level=logging.DEBUG if verbose else config.logging.level,
        log_file=config.logging.file,
    )

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["config_path"] = config_path or CONFIG_FILE

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


@main.command()
@click.pass_context
def menu(ctx: click.Context) -> None:
    """Open the interactive task menu."""
    from taskman.console import ConsoleDriver
    from taskman.store import TaskStore

    config: TaskmanConfig = ctx.obj["config"]

    console.print(Panel.fit("[bold]Task manager[/bold]", title=f"taskman {__version__}"))
    ConsoleDriver(TaskStore(), config=config, console=console).run()


@main.command()
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def show(ctx: click.Context, path: Path) -> None:
    """Print the tasks saved in PATH as a table."""
    from taskman.errors import TaskStoreError
    from taskman.store import TaskStore

    config: TaskmanConfig = ctx.obj["config"]
    date_format = config.display.date_format

    store = TaskStore()
    try:
        store.deserialize_from_file(path)
    except TaskStoreError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    tasks = store.enumerate()
    if not tasks:
        console.print(f"[dim]No tasks in {escape(str(path))}.[/dim]")
        return

    table = Table(title=f"Tasks: {escape(path.name)}", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Priority")
    table.add_column("Created", style="dim")
    table.add_column("Updated", style="dim")
    table.add_column("Description", style="white")

    for task in tasks:
        style = PRIORITY_STYLES[task.priority.value]
        table.add_row(
            escape(task.name),
            f"[{style}]{task.priority}[/{style}]",
            task.date_created.strftime(date_format),
            task.date_updated.strftime(date_format) if task.date_updated else "-",
            escape(task.description),
        )

    console.print(table)


@main.command("config")
@click.option("--init", "init_config", is_flag=True, help="Write the default configuration")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def config_command(ctx: click.Context, init_config: bool, force: bool) -> None:
    """Show the effective configuration."""
    config: TaskmanConfig = ctx.obj["config"]
    config_path: Path = ctx.obj["config_path"]

    if not init_config:
        console.print_json(json.dumps(config.model_dump(exclude_none=True)))
        return

    if config_path.exists() and not force:
        console.print(
            f"[yellow]Config already exists:[/yellow] {escape(str(config_path))}. "
            "Use --force to overwrite."
        )
        return

    TaskmanConfig().save(config_path)
    console.print(f"[green]Configuration saved[/green] to [cyan]{escape(str(config_path))}[/cyan]")
