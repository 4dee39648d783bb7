"""Pytest configuration and fixtures for todoapp tests."""

import mongomock
import pytest

from todoapp.config import get_settings
from todoapp.repositories import MongoTransactionManager, TagRepository, TaskRepository
from todoapp.schemas.models import Tag, Task
from todoapp.services import TodoService


class SnapshotTransactionManager(MongoTransactionManager):
    """MongoTransactionManager for mongomock, which has no client sessions.

    Both collections are snapshotted before the unit of work runs and restored
    if it raises, giving the all-or-nothing behaviour of a real transaction.
    The unit of work receives ``None`` as its session.
    """

    def _run_in_session(self, body):
        collections = (self.task_repository.collection, self.tag_repository.collection)
        snapshots = [list(collection.find()) for collection in collections]
        try:
            return body(None)
        except Exception:
            for collection, documents in zip(collections, snapshots, strict=True):
                collection.delete_many({})
                if documents:
                    collection.insert_many(documents)
            raise


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read the environment afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_task():
    return Task(id="1", description="Buy groceries")


@pytest.fixture
def another_task():
    return Task(id="2", description="Start using TDD")


@pytest.fixture
def sample_tag():
    return Tag(id="1", name="Important")


@pytest.fixture
def another_tag():
    return Tag(id="2", name="Work")


@pytest.fixture
def mongo_client():
    """In-memory MongoDB client."""
    return mongomock.MongoClient()


@pytest.fixture
def task_collection(mongo_client):
    return mongo_client["todoapp"]["tasks"]


@pytest.fixture
def tag_collection(mongo_client):
    return mongo_client["todoapp"]["tags"]


@pytest.fixture
def task_repository(task_collection):
    return TaskRepository(task_collection)


@pytest.fixture
def tag_repository(tag_collection):
    return TagRepository(tag_collection)


@pytest.fixture
def transaction_manager(mongo_client, task_repository, tag_repository):
    return SnapshotTransactionManager(mongo_client, task_repository, tag_repository)


@pytest.fixture
def todo_service(transaction_manager):
    return TodoService(transaction_manager)


@pytest.fixture
def make_todo_service():
    """Factory building a service over a brand new in-memory database."""

    def factory():
        client = mongomock.MongoClient()
        task_repository = TaskRepository(client["todoapp"]["tasks"])
        tag_repository = TagRepository(client["todoapp"]["tags"])
        manager = SnapshotTransactionManager(client, task_repository, tag_repository)
        return TodoService(manager), task_repository, tag_repository

    return factory
