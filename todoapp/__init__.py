"""todoapp - personal task and tag manager.

Core Components:
- schemas: Task and Tag records
- repositories: MongoDB repositories and the transaction manager
- services: use cases keeping task/tag links consistent
- controller / views: presentation layer
- cli: typer command-line front end
"""

from .controller import TodoController
from .exceptions import (
    TagRepositoryError,
    TaskRepositoryError,
    TodoError,
    TransactionAbortedError,
)
from .repositories import MongoTransactionManager, TransactionManager
from .schemas import Tag, Task
from .services import TodoService

__all__ = [
    "MongoTransactionManager",
    "Tag",
    "TagRepositoryError",
    "Task",
    "TaskRepositoryError",
    "TodoController",
    "TodoError",
    "TodoService",
    "TransactionAbortedError",
    "TransactionManager",
]
