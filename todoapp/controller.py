"""Controller translating user actions into service calls.

Service results are pushed to the view; domain errors end up on the error
label of the matching tab and never escape the controller.
"""

import logging
from collections.abc import Callable

from .exceptions import TagRepositoryError, TaskRepositoryError, TransactionAbortedError
from .schemas.models import Tag, Task
from .services import TodoService
from .views import TodoView


logger = logging.getLogger(__name__)


class TodoController:
    """Mediates between a TodoView and the TodoService."""

    def __init__(self, todo_service: TodoService, todo_view: TodoView):
        self.todo_service = todo_service
        self.todo_view = todo_view

    # Tasks tab

    def get_all_tasks(self) -> None:
        try:
            self.todo_view.show_all_tasks(self.todo_service.get_all_tasks())
        except TransactionAbortedError as e:
            self.todo_view.task_error(str(e))

    def add_task(self, task: Task) -> None:
        try:
            self.todo_service.save_task(task)
        except (TaskRepositoryError, TransactionAbortedError) as e:
            self.todo_view.task_error(str(e))
            return
        self.todo_view.task_added(task)

    def delete_task(self, task: Task) -> None:
        try:
            self.todo_service.delete_task(task)
        except (TaskRepositoryError, TransactionAbortedError) as e:
            self.todo_view.task_error(str(e))
            return
        self.todo_view.task_deleted(task)

    def get_tags_by_task(self, task: Task) -> None:
        try:
            tag_ids = self.todo_service.find_tags_by_task_id(task.id)
            tags = self._resolve(tag_ids, self.todo_service.find_tag_by_id)
        except (TaskRepositoryError, TransactionAbortedError) as e:
            self.todo_view.task_error(str(e))
            return
        self.todo_view.show_task_tags(tags)

    def add_tag_to_task(self, task: Task, tag: Tag) -> None:
        if self._link(
            self.todo_service.add_tag_to_task, task, tag, self.todo_view.task_error
        ):
            self.todo_view.tag_added_to_task(tag)

    def remove_tag_from_task(self, task: Task, tag: Tag) -> None:
        if self._link(
            self.todo_service.remove_tag_from_task, task, tag, self.todo_view.task_error
        ):
            self.todo_view.tag_removed_from_task(tag)

    # Tags tab

    def get_all_tags(self) -> None:
        try:
            self.todo_view.show_all_tags(self.todo_service.get_all_tags())
        except TransactionAbortedError as e:
            self.todo_view.tag_error(str(e))

    def add_tag(self, tag: Tag) -> None:
        try:
            self.todo_service.save_tag(tag)
        except (TagRepositoryError, TransactionAbortedError) as e:
            self.todo_view.tag_error(str(e))
            return
        self.todo_view.tag_added(tag)

    def delete_tag(self, tag: Tag) -> None:
        try:
            self.todo_service.delete_tag(tag)
        except (TagRepositoryError, TransactionAbortedError) as e:
            self.todo_view.tag_error(str(e))
            return
        self.todo_view.tag_deleted(tag)

    def get_tasks_by_tag(self, tag: Tag) -> None:
        try:
            task_ids = self.todo_service.find_tasks_by_tag_id(tag.id)
            tasks = self._resolve(task_ids, self.todo_service.find_task_by_id)
        except (TagRepositoryError, TransactionAbortedError) as e:
            self.todo_view.tag_error(str(e))
            return
        self.todo_view.show_tag_tasks(tasks)

    def add_task_to_tag(self, tag: Tag, task: Task) -> None:
        if self._link(
            self.todo_service.add_tag_to_task, task, tag, self.todo_view.tag_error
        ):
            self.todo_view.task_added_to_tag(task)

    def remove_task_from_tag(self, tag: Tag, task: Task) -> None:
        if self._link(
            self.todo_service.remove_task_from_tag, task, tag, self.todo_view.tag_error
        ):
            self.todo_view.task_removed_from_tag(task)

    def _link(
        self,
        operation: Callable[[str, str], None],
        task: Task,
        tag: Tag,
        abort_error: Callable[[str], None],
    ) -> bool:
        """Run an association change, routing errors to the proper tab."""
        try:
            operation(task.id, tag.id)
        except TaskRepositoryError as e:
            self.todo_view.task_error(str(e))
        except TagRepositoryError as e:
            self.todo_view.tag_error(str(e))
        except TransactionAbortedError as e:
            abort_error(str(e))
        else:
            return True
        return False

    @staticmethod
    def _resolve(
        record_ids: list[str], finder: Callable[[str], Task | Tag | None]
    ) -> list[Task | Tag]:
        records = []
        for record_id in record_ids:
            record = finder(record_id)
            if record is None:
                # Deleted between the two transactions
                logger.debug(f"Skipping dangling reference {record_id}")
                continue
            records.append(record)
        return records
