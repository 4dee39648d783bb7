"""Task and tag records.

Both records are immutable value objects: two instances are equal when they
have the same type, the same id and the same text field. The id lists that
link tasks and tags are stored on the documents only and are never part of
the records themselves.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class TodoRecord(BaseModel):
    """Common configuration and document mapping for tasks and tags."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    # Name of the text field and of the id list kept on the stored document
    TEXT_FIELD: ClassVar[str]
    LINK_FIELD: ClassVar[str]

    id: str = Field(..., min_length=1, description="User supplied identifier")

    @property
    def text(self) -> str:
        """Return the record's text field (description or name)."""
        return getattr(self, self.TEXT_FIELD)

    def to_document(self) -> dict[str, Any]:
        """Build the document inserted for a brand new record."""
        return {"id": self.id, self.TEXT_FIELD: self.text, self.LINK_FIELD: []}

    @classmethod
    def from_document(cls, document: dict[str, Any]):
        """Rebuild a record from a stored document, ignoring ``_id`` and links."""
        return cls.model_validate(
            {"id": document["id"], cls.TEXT_FIELD: document[cls.TEXT_FIELD]}
        )


class Task(TodoRecord):
    """A to-do item."""

    TEXT_FIELD: ClassVar[str] = "description"
    LINK_FIELD: ClassVar[str] = "tags"

    description: str = Field(..., min_length=1, description="What has to be done")

    def __str__(self) -> str:
        return f"#{self.id} - {self.description}"


class Tag(TodoRecord):
    """A label that can be attached to any number of tasks."""

    TEXT_FIELD: ClassVar[str] = "name"
    LINK_FIELD: ClassVar[str] = "tasks"

    name: str = Field(..., min_length=1, description="Unique label name")

    def __str__(self) -> str:
        return f"({self.id}) {self.name}"
