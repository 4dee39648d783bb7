#!/usr/bin/env python3
"""Todo application CLI.

Command-line front end wiring the MongoDB repositories, the service layer, the
controller and the rich console view together.
"""

import logging
from collections.abc import Callable

import typer
from pydantic import ValidationError
from pymongo import MongoClient
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel

from .config import DatabaseSettings, MongoSettings, TodoSettings, get_settings
from .controller import TodoController
from .database import build_transaction_manager, create_client, init_database, verify_database
from .exceptions import TodoError
from .schemas.models import Tag, Task
from .services import TodoService
from .views import ConsoleTodoView


# Initialize CLI and console
app = typer.Typer(help="Personal task and tag manager backed by MongoDB")
console = Console()

logger = logging.getLogger(__name__)


class TodoCLI:
    """Holds the application components for the duration of one command."""

    def __init__(self):
        self.settings: TodoSettings | None = None
        self.client: MongoClient | None = None
        self.service: TodoService | None = None
        self.view: ConsoleTodoView | None = None
        self.controller: TodoController | None = None

    def initialize(self) -> None:
        """Build client, service, view and controller if not already done."""
        if self.controller:
            return
        settings = self.settings or get_settings()
        self.client = create_client(settings)
        self.service = TodoService(build_transaction_manager(self.client, settings))
        self.view = ConsoleTodoView(console)
        self.controller = TodoController(self.service, self.view)

    def cleanup(self) -> None:
        if self.client:
            self.client.close()
        self.client = None
        self.service = None
        self.view = None
        self.controller = None

    def find_task(self, task_id: str) -> Task | None:
        task = self.service.find_task_by_id(task_id)
        if task is None:
            self.view.task_error(f"Task with ID {task_id} not found")
        return task

    def find_tag(self, tag_id: str) -> Tag | None:
        tag = self.service.find_tag_by_id(tag_id)
        if tag is None:
            self.view.tag_error(f"Tag with ID {tag_id} not found")
        return tag


# Global CLI instance
cli_instance = TodoCLI()


def _format_validation_error(error: ValidationError) -> str:
    """One line per failed field, e.g. ``Invalid port: Input should be ...``."""
    lines = []
    for detail in error.errors():
        field = ".".join(str(part) for part in detail["loc"])
        lines.append(f"Invalid {field}: {detail['msg']}" if field else detail["msg"])
    return "\n".join(lines)


def _run(action: Callable[[TodoCLI], None]) -> None:
    """Run one user action and exit with status 1 if it ended in error."""
    failed = False
    try:
        cli_instance.initialize()
        action(cli_instance)
        failed = cli_instance.view.has_error
    except ValidationError as e:
        console.print(f"[bold red]{_format_validation_error(e)}[/bold red]")
        failed = True
    except TodoError as e:
        console.print(f"[bold red]{e}[/bold red]")
        failed = True
    finally:
        cli_instance.cleanup()

    if failed:
        raise typer.Exit(code=1)


@app.command("tasks")
def list_tasks():
    """Show all tasks."""
    _run(lambda cli: cli.controller.get_all_tasks())


@app.command("add-task")
def add_task(
    task_id: str = typer.Argument(..., help="Task identifier"),
    description: str = typer.Argument(..., help="Task description"),
):
    """Add a new task."""

    def action(cli: TodoCLI) -> None:
        cli.controller.add_task(Task(id=task_id, description=description))

    _run(action)


@app.command("delete-task")
def delete_task(task_id: str = typer.Argument(..., help="Task identifier")):
    """Delete a task and unassign it from all its tags."""

    def action(cli: TodoCLI) -> None:
        task = cli.find_task(task_id)
        if task is not None:
            cli.controller.delete_task(task)

    _run(action)


@app.command("tags")
def list_tags():
    """Show all tags."""
    _run(lambda cli: cli.controller.get_all_tags())


@app.command("add-tag")
def add_tag(
    tag_id: str = typer.Argument(..., help="Tag identifier"),
    name: str = typer.Argument(..., help="Tag name"),
):
    """Add a new tag."""

    def action(cli: TodoCLI) -> None:
        cli.controller.add_tag(Tag(id=tag_id, name=name))

    _run(action)


@app.command("delete-tag")
def delete_tag(tag_id: str = typer.Argument(..., help="Tag identifier")):
    """Delete a tag and remove it from all its tasks."""

    def action(cli: TodoCLI) -> None:
        tag = cli.find_tag(tag_id)
        if tag is not None:
            cli.controller.delete_tag(tag)

    _run(action)


@app.command("assign")
def assign_tag(
    task_id: str = typer.Argument(..., help="Task identifier"),
    tag_id: str = typer.Argument(..., help="Tag identifier"),
):
    """Assign a tag to a task."""

    def action(cli: TodoCLI) -> None:
        task = cli.find_task(task_id)
        tag = cli.find_tag(tag_id)
        if task is not None and tag is not None:
            cli.controller.add_tag_to_task(task, tag)

    _run(action)


@app.command("unassign")
def unassign_tag(
    task_id: str = typer.Argument(..., help="Task identifier"),
    tag_id: str = typer.Argument(..., help="Tag identifier"),
):
    """Remove a tag from a task."""

    def action(cli: TodoCLI) -> None:
        task = cli.find_task(task_id)
        tag = cli.find_tag(tag_id)
        if task is not None and tag is not None:
            cli.controller.remove_tag_from_task(task, tag)

    _run(action)


@app.command("task-tags")
def task_tags(task_id: str = typer.Argument(..., help="Task identifier")):
    """Show the tags assigned to a task."""

    def action(cli: TodoCLI) -> None:
        task = cli.find_task(task_id)
        if task is not None:
            cli.controller.get_tags_by_task(task)

    _run(action)


@app.command("tag-tasks")
def tag_tasks(tag_id: str = typer.Argument(..., help="Tag identifier")):
    """Show the tasks a tag is assigned to."""

    def action(cli: TodoCLI) -> None:
        tag = cli.find_tag(tag_id)
        if tag is not None:
            cli.controller.get_tasks_by_tag(tag)

    _run(action)


@app.command("init-db")
def init_db():
    """Create collections and indexes, then verify the database."""
    settings = cli_instance.settings or get_settings()
    client = create_client(settings)
    try:
        with console.status("[bold green]Initializing database..."):
            init_database(client, settings)
            counts = verify_database(client, settings)
    except Exception as e:
        console.print(f"[bold red]Database initialization failed: {e}[/bold red]")
        raise typer.Exit(code=1) from e
    finally:
        client.close()

    if counts is None:
        console.print("[bold red]Database is not reachable[/bold red]")
        raise typer.Exit(code=1)

    console.print(
        Panel.fit(
            f"Database: {settings.database.name}\n"
            f"Tasks: {counts['tasks']}\n"
            f"Tags: {counts['tags']}",
            title="Database ready",
            border_style="green",
        )
    )


def configure_logging(level: str) -> None:
    """Route log records through rich at the given level."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.callback()
def main(
    mongo_host: str | None = typer.Option(
        None, "--mongo-host", help="MongoDB instance address"
    ),
    mongo_port: int | None = typer.Option(
        None, "--mongo-port", help="MongoDB instance port"
    ),
    db_name: str | None = typer.Option(None, "--db-name", help="Database name"),
    tasks_collection: str | None = typer.Option(
        None, "--db-tasks-collection", help="Tasks collection name"
    ),
    tags_collection: str | None = typer.Option(
        None, "--db-tags-collection", help="Tags collection name"
    ),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level"),
):
    """Personal task and tag manager.

    Options override the TODOAPP_* environment variables and the .env file.
    """
    settings = get_settings()

    mongo_updates = {"host": mongo_host, "port": mongo_port}
    database_updates = {
        "name": db_name,
        "tasks_collection": tasks_collection,
        "tags_collection": tags_collection,
    }
    try:
        mongo = MongoSettings.model_validate(
            {
                **settings.mongo.model_dump(),
                **{k: v for k, v in mongo_updates.items() if v is not None},
            }
        )
        database = DatabaseSettings.model_validate(
            {
                **settings.database.model_dump(),
                **{k: v for k, v in database_updates.items() if v is not None},
            }
        )
    except ValidationError as e:
        raise typer.BadParameter(_format_validation_error(e)) from e

    updates = {"mongo": mongo, "database": database}
    if log_level is not None:
        if log_level.upper() not in logging.getLevelNamesMapping():
            raise typer.BadParameter(f"Unknown log level: {log_level}")
        updates["log_level"] = log_level.upper()

    cli_instance.settings = settings.model_copy(update=updates)
    configure_logging(cli_instance.settings.log_level)


if __name__ == "__main__":
    app()
