"""Terminal view rendering the application state with rich."""

from rich.console import Console
from rich.table import Table

from ..schemas.models import Tag, Task
from .base import TodoView


class ConsoleTodoView(TodoView):
    """TodoView keeping list models in memory and printing them with rich.

    The lists mirror what a windowed client would show: all tasks, all tags,
    the tags of the selected task and the tasks of the selected tag.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.tasks: list[Task] = []
        self.tags: list[Tag] = []
        self.task_tags: list[Tag] = []
        self.tag_tasks: list[Task] = []
        self.task_error_message = ""
        self.tag_error_message = ""

    @property
    def has_error(self) -> bool:
        return bool(self.task_error_message or self.tag_error_message)

    # Tasks tab

    def show_all_tasks(self, tasks: list[Task]) -> None:
        self.tasks = list(tasks)
        self._print_records("Todo List", self.tasks, "Description")

    def task_added(self, task: Task) -> None:
        self.tasks.append(task)
        self.task_error_message = ""
        self.console.print(f"[green]Added task {task}[/green]")

    def task_deleted(self, task: Task) -> None:
        self.tasks = [t for t in self.tasks if t.id != task.id]
        self.tag_tasks = [t for t in self.tag_tasks if t.id != task.id]
        self.task_error_message = ""
        self.console.print(f"[green]Deleted task {task}[/green]")

    def task_error(self, message: str) -> None:
        self.task_error_message = message
        self.console.print(f"[bold red]{message}[/bold red]")

    def show_task_tags(self, tags: list[Tag]) -> None:
        self.task_tags = list(tags)
        self._print_records("Assigned tags", self.task_tags, "Name")

    def tag_added_to_task(self, tag: Tag) -> None:
        self.task_tags.append(tag)
        self.task_error_message = ""
        self.console.print(f"[green]Assigned tag {tag}[/green]")

    def tag_removed_from_task(self, tag: Tag) -> None:
        self.task_tags = [t for t in self.task_tags if t.id != tag.id]
        self.task_error_message = ""
        self.console.print(f"[green]Removed tag {tag}[/green]")

    # Tags tab

    def show_all_tags(self, tags: list[Tag]) -> None:
        self.tags = list(tags)
        self._print_records("Tags", self.tags, "Name")

    def tag_added(self, tag: Tag) -> None:
        self.tags.append(tag)
        self.tag_error_message = ""
        self.console.print(f"[green]Added tag {tag}[/green]")

    def tag_deleted(self, tag: Tag) -> None:
        self.tags = [t for t in self.tags if t.id != tag.id]
        self.task_tags = [t for t in self.task_tags if t.id != tag.id]
        self.tag_error_message = ""
        self.console.print(f"[green]Deleted tag {tag}[/green]")

    def tag_error(self, message: str) -> None:
        self.tag_error_message = message
        self.console.print(f"[bold red]{message}[/bold red]")

    def show_tag_tasks(self, tasks: list[Task]) -> None:
        self.tag_tasks = list(tasks)
        self._print_records("Tagged tasks", self.tag_tasks, "Description")

    def task_added_to_tag(self, task: Task) -> None:
        self.tag_tasks.append(task)
        self.tag_error_message = ""
        self.console.print(f"[green]Tagged task {task}[/green]")

    def task_removed_from_tag(self, task: Task) -> None:
        self.tag_tasks = [t for t in self.tag_tasks if t.id != task.id]
        self.tag_error_message = ""
        self.console.print(f"[green]Untagged task {task}[/green]")

    def _print_records(self, title: str, records: list, text_header: str) -> None:
        if not records:
            self.console.print(f"[yellow]{title}: nothing to show[/yellow]")
            return

        table = Table(title=title, show_header=True, header_style="bold magenta")
        table.add_column("ID", style="cyan")
        table.add_column(text_header, style="white")
        for record in records:
            table.add_row(record.id, record.text)
        self.console.print(table)
