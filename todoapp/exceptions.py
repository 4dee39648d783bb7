"""Exception hierarchy for the todo application.

Domain errors carry a user-facing message that the controller forwards to the
view unchanged. Anything that goes wrong inside the database driver during a
unit of work is reported as a ``TransactionAbortedError``.
"""


class TodoError(Exception):
    """Base class for all todoapp errors."""


class TaskRepositoryError(TodoError):
    """A task operation violated a domain rule (duplicate id, missing task...)."""


class TagRepositoryError(TodoError):
    """A tag operation violated a domain rule (duplicate id or name...)."""


class TransactionAbortedError(TodoError):
    """The transaction was aborted and none of its writes were committed."""


__all__ = [
    "TagRepositoryError",
    "TaskRepositoryError",
    "TodoError",
    "TransactionAbortedError",
]
