"""Base repository pattern with common document operations.

Every repository wraps exactly one MongoDB collection. All methods take the
client session of the surrounding transaction so that writes issued through
different repositories commit or abort together.
"""

from typing import Generic, TypeVar

from pymongo.client_session import ClientSession
from pymongo.collection import Collection

from ..exceptions import TodoError
from ..schemas.models import TodoRecord


RecordT = TypeVar("RecordT", bound=TodoRecord)


class BaseRepository(Generic[RecordT]):
    """Base repository with common CRUD and link-list operations.

    Subclasses only declare the record class and the error raised when a
    record that must exist is missing.
    """

    record_class: type[RecordT]
    not_found_error: type[TodoError] = TodoError

    ID = "id"

    def __init__(self, collection: Collection):
        self.collection = collection

    @property
    def link_field(self) -> str:
        return self.record_class.LINK_FIELD

    def find_all(self, session: ClientSession | None = None) -> list[RecordT]:
        """Get all records in insertion order."""
        return [
            self.record_class.from_document(document)
            for document in self.collection.find(session=session)
        ]

    def find_by_id(
        self, record_id: str, session: ClientSession | None = None
    ) -> RecordT | None:
        """Get a record by id, or None when it does not exist."""
        document = self.collection.find_one({self.ID: record_id}, session=session)
        if document is None:
            return None
        return self.record_class.from_document(document)

    def save(self, record: RecordT, session: ClientSession | None = None) -> None:
        """Insert a new record with an empty link list."""
        self.collection.insert_one(record.to_document(), session=session)

    def delete(self, record: RecordT, session: ClientSession | None = None) -> None:
        """Delete the record with the same id."""
        self.collection.delete_one({self.ID: record.id}, session=session)

    def get_links(
        self, record_id: str, session: ClientSession | None = None
    ) -> list[str]:
        """Return the ids linked to a record.

        Raises:
            TodoError: subclass given by ``not_found_error`` when the record
                does not exist

        """
        document = self.collection.find_one(
            {self.ID: record_id}, {self.link_field: 1}, session=session
        )
        if document is None:
            raise self.not_found_error(
                f"{self.record_class.__name__} with ID {record_id} not found"
            )
        return list(document.get(self.link_field, []))

    def add_link(
        self, record_id: str, linked_id: str, session: ClientSession | None = None
    ) -> None:
        # $addToSet keeps the link list a set even if called twice
        self.collection.update_one(
            {self.ID: record_id},
            {"$addToSet": {self.link_field: linked_id}},
            session=session,
        )

    def remove_link(
        self, record_id: str, linked_id: str, session: ClientSession | None = None
    ) -> None:
        self.collection.update_one(
            {self.ID: record_id},
            {"$pull": {self.link_field: linked_id}},
            session=session,
        )

    def count(self, session: ClientSession | None = None) -> int:
        """Count stored records."""
        return self.collection.count_documents({}, session=session)

    def exists(self, record_id: str, session: ClientSession | None = None) -> bool:
        """Check if a record exists."""
        return self.find_by_id(record_id, session) is not None

