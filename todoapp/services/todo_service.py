"""Use cases of the todo application.

Every public method runs in exactly one transaction. Operations touching the
task/tag association always update both sides inside a composite
transaction, so the id lists stored on tasks and on tags stay symmetric.
"""

import logging

from ..exceptions import TagRepositoryError, TaskRepositoryError
from ..repositories import TransactionManager
from ..schemas.models import Tag, Task


logger = logging.getLogger(__name__)


class TodoService:
    """Service layer coordinating the task and tag repositories."""

    def __init__(self, transaction_manager: TransactionManager):
        self.transaction_manager = transaction_manager

    # ------------------------------------------------------------------
    # Tasks
    # ------------------------------------------------------------------

    def get_all_tasks(self) -> list[Task]:
        return self.transaction_manager.do_task_transaction(
            lambda task_repository, session: task_repository.find_all(session)
        )

    def find_task_by_id(self, task_id: str) -> Task | None:
        return self.transaction_manager.do_task_transaction(
            lambda task_repository, session: task_repository.find_by_id(
                task_id, session
            )
        )

    def save_task(self, task: Task) -> None:
        """Store a new task.

        Raises:
            TaskRepositoryError: If a task with the same id already exists

        """

        def save(task_repository, session):
            if task_repository.find_by_id(task.id, session) is not None:
                raise TaskRepositoryError(
                    f"Cannot add task with duplicated ID {task.id}"
                )
            task_repository.save(task, session)

        self.transaction_manager.do_task_transaction(save)
        logger.info(f"Saved task {task.id}")

    def delete_task(self, task: Task) -> None:
        """Delete a task and detach it from every tag it was assigned to.

        Raises:
            TaskRepositoryError: If the task does not exist anymore

        """

        def delete(task_repository, tag_repository, session):
            if task_repository.find_by_id(task.id, session) is None:
                raise TaskRepositoryError(
                    f"Task with ID {task.id} has already been deleted"
                )
            for tag_id in task_repository.get_tags_by_task_id(task.id, session):
                tag_repository.remove_task_from_tag(tag_id, task.id, session)
            task_repository.delete(task, session)

        self.transaction_manager.do_composite_transaction(delete)
        logger.info(f"Deleted task {task.id}")

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    def get_all_tags(self) -> list[Tag]:
        return self.transaction_manager.do_tag_transaction(
            lambda tag_repository, session: tag_repository.find_all(session)
        )

    def find_tag_by_id(self, tag_id: str) -> Tag | None:
        return self.transaction_manager.do_tag_transaction(
            lambda tag_repository, session: tag_repository.find_by_id(tag_id, session)
        )

    def save_tag(self, tag: Tag) -> None:
        """Store a new tag.

        Raises:
            TagRepositoryError: If a tag with the same id or name already exists

        """

        def save(tag_repository, session):
            if tag_repository.find_by_id(tag.id, session) is not None:
                raise TagRepositoryError(f"Cannot add tag with duplicated ID {tag.id}")
            if tag_repository.find_by_name(tag.name, session) is not None:
                raise TagRepositoryError(
                    f'Cannot add tag with duplicated name "{tag.name}"'
                )
            tag_repository.save(tag, session)

        self.transaction_manager.do_tag_transaction(save)
        logger.info(f"Saved tag {tag.id}")

    def delete_tag(self, tag: Tag) -> None:
        """Delete a tag and detach it from every task it was assigned to.

        Raises:
            TagRepositoryError: If the tag does not exist anymore

        """

        def delete(task_repository, tag_repository, session):
            if tag_repository.find_by_id(tag.id, session) is None:
                raise TagRepositoryError(
                    f"Tag with ID {tag.id} has already been deleted"
                )
            for task_id in tag_repository.get_tasks_by_tag_id(tag.id, session):
                task_repository.remove_tag_from_task(task_id, tag.id, session)
            tag_repository.delete(tag, session)

        self.transaction_manager.do_composite_transaction(delete)
        logger.info(f"Deleted tag {tag.id}")

    # ------------------------------------------------------------------
    # Associations
    # ------------------------------------------------------------------

    def add_tag_to_task(self, task_id: str, tag_id: str) -> None:
        """Assign a tag to a task, recording the link on both documents.

        Raises:
            TaskRepositoryError: If the task does not exist
            TagRepositoryError: If the tag does not exist or is already assigned

        """

        def assign(task_repository, tag_repository, session):
            tag_ids = task_repository.get_tags_by_task_id(task_id, session)
            if not tag_repository.exists(tag_id, session):
                raise TagRepositoryError(f"Tag with ID {tag_id} not found")
            if tag_id in tag_ids:
                raise TagRepositoryError(
                    f"Tag with ID {tag_id} is already assigned to task with ID {task_id}"
                )
            task_repository.add_tag_to_task(task_id, tag_id, session)
            tag_repository.add_task_to_tag(tag_id, task_id, session)

        self.transaction_manager.do_composite_transaction(assign)
        logger.info(f"Assigned tag {tag_id} to task {task_id}")

    def remove_tag_from_task(self, task_id: str, tag_id: str) -> None:
        """Unassign a tag from a task, removing the link from both documents.

        Raises:
            TaskRepositoryError: If the task does not exist
            TagRepositoryError: If the tag does not exist or is not assigned

        """

        def unassign(task_repository, tag_repository, session):
            tag_ids = task_repository.get_tags_by_task_id(task_id, session)
            if not tag_repository.exists(tag_id, session):
                raise TagRepositoryError(f"Tag with ID {tag_id} not found")
            if tag_id not in tag_ids:
                raise TagRepositoryError(
                    f"Tag with ID {tag_id} is not assigned to task with ID {task_id}"
                )
            task_repository.remove_tag_from_task(task_id, tag_id, session)
            tag_repository.remove_task_from_tag(tag_id, task_id, session)

        self.transaction_manager.do_composite_transaction(unassign)
        logger.info(f"Removed tag {tag_id} from task {task_id}")

    def remove_task_from_tag(self, task_id: str, tag_id: str) -> None:
        """Same as ``remove_tag_from_task``, issued from the tag side."""
        self.remove_tag_from_task(task_id, tag_id)

    def find_tags_by_task_id(self, task_id: str) -> list[str]:
        return self.transaction_manager.do_task_transaction(
            lambda task_repository, session: task_repository.get_tags_by_task_id(
                task_id, session
            )
        )

    def find_tasks_by_tag_id(self, tag_id: str) -> list[str]:
        return self.transaction_manager.do_tag_transaction(
            lambda tag_repository, session: tag_repository.get_tasks_by_tag_id(
                tag_id, session
            )
        )
