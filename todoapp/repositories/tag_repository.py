"""Repository for the tags collection."""

from pymongo.client_session import ClientSession

from ..exceptions import TagRepositoryError
from ..schemas.models import Tag
from .base import BaseRepository


class TagRepository(BaseRepository[Tag]):
    """Tags and the ids of the tasks each of them is attached to."""

    record_class = Tag
    not_found_error = TagRepositoryError

    def find_by_name(
        self, name: str, session: ClientSession | None = None
    ) -> Tag | None:
        """Get a tag by its (unique) name."""
        document = self.collection.find_one({Tag.TEXT_FIELD: name}, session=session)
        if document is None:
            return None
        return Tag.from_document(document)

    def get_tasks_by_tag_id(
        self, tag_id: str, session: ClientSession | None = None
    ) -> list[str]:
        """Get the ids of the tasks a tag is attached to."""
        return self.get_links(tag_id, session)

    def add_task_to_tag(
        self, tag_id: str, task_id: str, session: ClientSession | None = None
    ) -> None:
        self.add_link(tag_id, task_id, session)

    def remove_task_from_tag(
        self, tag_id: str, task_id: str, session: ClientSession | None = None
    ) -> None:
        self.remove_link(tag_id, task_id, session)
