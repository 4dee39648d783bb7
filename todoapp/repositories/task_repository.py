"""Repository for the tasks collection."""

from pymongo.client_session import ClientSession

from ..exceptions import TaskRepositoryError
from ..schemas.models import Task
from .base import BaseRepository


class TaskRepository(BaseRepository[Task]):
    """Tasks and the ids of the tags attached to each of them."""

    record_class = Task
    not_found_error = TaskRepositoryError

    def get_tags_by_task_id(
        self, task_id: str, session: ClientSession | None = None
    ) -> list[str]:
        """Get the ids of the tags attached to a task."""
        return self.get_links(task_id, session)

    def add_tag_to_task(
        self, task_id: str, tag_id: str, session: ClientSession | None = None
    ) -> None:
        self.add_link(task_id, tag_id, session)

    def remove_tag_from_task(
        self, task_id: str, tag_id: str, session: ClientSession | None = None
    ) -> None:
        self.remove_link(task_id, tag_id, session)
