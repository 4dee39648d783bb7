"""View contract the controller talks to."""

from abc import ABC, abstractmethod

from ..schemas.models import Tag, Task


class TodoView(ABC):
    """Presentation side of the application.

    The view owns two tabs, tasks and tags. Each tab has an error label that
    ``task_error``/``tag_error`` fill and that a successful action clears.
    """

    @abstractmethod
    def show_all_tasks(self, tasks: list[Task]) -> None: ...

    @abstractmethod
    def task_added(self, task: Task) -> None: ...

    @abstractmethod
    def task_deleted(self, task: Task) -> None: ...

    @abstractmethod
    def task_error(self, message: str) -> None: ...

    @abstractmethod
    def show_all_tags(self, tags: list[Tag]) -> None: ...

    @abstractmethod
    def tag_added(self, tag: Tag) -> None: ...

    @abstractmethod
    def tag_deleted(self, tag: Tag) -> None: ...

    @abstractmethod
    def tag_error(self, message: str) -> None: ...

    @abstractmethod
    def show_task_tags(self, tags: list[Tag]) -> None:
        """Show the tags assigned to the selected task."""

    @abstractmethod
    def show_tag_tasks(self, tasks: list[Task]) -> None:
        """Show the tasks the selected tag is assigned to."""

    @abstractmethod
    def tag_added_to_task(self, tag: Tag) -> None: ...

    @abstractmethod
    def tag_removed_from_task(self, tag: Tag) -> None: ...

    @abstractmethod
    def task_added_to_tag(self, task: Task) -> None: ...

    @abstractmethod
    def task_removed_from_tag(self, task: Task) -> None: ...
