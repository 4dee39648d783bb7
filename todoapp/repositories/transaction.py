"""Transaction management across the task and tag repositories.

A unit of work is a callable that receives one or both repositories plus the
client session it must pass to every repository call. The manager runs it
inside a native MongoDB multi-document transaction, so writes to the two
collections become visible together or not at all.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TypeVar

from pymongo import MongoClient
from pymongo.client_session import ClientSession

from ..exceptions import TagRepositoryError, TaskRepositoryError, TransactionAbortedError
from .tag_repository import TagRepository
from .task_repository import TaskRepository


logger = logging.getLogger(__name__)

T = TypeVar("T")

TaskTransactionCode = Callable[[TaskRepository, ClientSession], T]
TagTransactionCode = Callable[[TagRepository, ClientSession], T]
CompositeTransactionCode = Callable[[TaskRepository, TagRepository, ClientSession], T]


class TransactionManager(ABC):
    """Runs units of work atomically against the repositories."""

    @abstractmethod
    def do_task_transaction(self, code: TaskTransactionCode[T]) -> T:
        """Run ``code(task_repository, session)`` in one transaction."""

    @abstractmethod
    def do_tag_transaction(self, code: TagTransactionCode[T]) -> T:
        """Run ``code(tag_repository, session)`` in one transaction."""

    @abstractmethod
    def do_composite_transaction(self, code: CompositeTransactionCode[T]) -> T:
        """Run ``code(task_repository, tag_repository, session)`` in one transaction."""


class MongoTransactionManager(TransactionManager):
    """Transaction manager backed by MongoDB client sessions.

    Domain errors raised by a unit of work abort the transaction and reach the
    caller unchanged. Every other failure, including a failed commit, aborts
    the transaction and is raised as ``TransactionAbortedError``.
    """

    def __init__(
        self,
        client: MongoClient,
        task_repository: TaskRepository,
        tag_repository: TagRepository,
    ):
        self.client = client
        self.task_repository = task_repository
        self.tag_repository = tag_repository

    def do_task_transaction(self, code: TaskTransactionCode[T]) -> T:
        return self._execute(
            "Task", lambda session: code(self.task_repository, session)
        )

    def do_tag_transaction(self, code: TagTransactionCode[T]) -> T:
        return self._execute("Tag", lambda session: code(self.tag_repository, session))

    def do_composite_transaction(self, code: CompositeTransactionCode[T]) -> T:
        return self._execute(
            "Composite",
            lambda session: code(self.task_repository, self.tag_repository, session),
        )

    def _execute(self, kind: str, body: Callable[[ClientSession], T]) -> T:
        logger.debug(f"Starting {kind.lower()} transaction")
        try:
            value = self._run_in_session(body)
        except (TaskRepositoryError, TagRepositoryError) as e:
            logger.info(f"{kind} transaction rolled back: {e}")
            raise
        except Exception as e:
            logger.warning(f"{kind} transaction failed, aborting: {e!r}")
            raise TransactionAbortedError(f"{kind} transaction failed, aborting") from e

        logger.debug(f"{kind} transaction committed")
        return value

    def _run_in_session(self, body: Callable[[ClientSession], T]) -> T:
        # with_transaction commits on return, aborts on raise and retries
        # transient errors; the session is ended by the context manager
        with self.client.start_session() as session:
            return session.with_transaction(body)


__all__ = [
    "CompositeTransactionCode",
    "MongoTransactionManager",
    "TagTransactionCode",
    "TaskTransactionCode",
    "TransactionManager",
]
