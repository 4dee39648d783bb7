"""Repository layer over the MongoDB task and tag collections.

Each repository owns one collection; the transaction manager ties them
together so that cross-collection updates are atomic.
"""

from .base import BaseRepository
from .tag_repository import TagRepository
from .task_repository import TaskRepository
from .transaction import MongoTransactionManager, TransactionManager


__all__ = [
    "BaseRepository",
    "MongoTransactionManager",
    "TagRepository",
    "TaskRepository",
    "TransactionManager",
]
