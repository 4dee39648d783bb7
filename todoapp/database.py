"""MongoDB client creation and database bootstrap.

Multi-document transactions need a replica set (or a sharded cluster).
Collections and indexes are created up front by ``init_database`` because
older servers refuse to create collections inside a transaction.
"""

import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import TodoSettings, get_settings
from .repositories import MongoTransactionManager, TagRepository, TaskRepository


logger = logging.getLogger(__name__)


def create_client(settings: TodoSettings | None = None) -> MongoClient:
    """Create a MongoClient from the configured connection settings."""
    settings = settings or get_settings()
    mongo = settings.mongo

    kwargs = {"serverSelectionTimeoutMS": mongo.server_selection_timeout_ms}
    if mongo.replica_set:
        kwargs["replicaSet"] = mongo.replica_set

    if mongo.uri:
        return MongoClient(mongo.uri, **kwargs)
    return MongoClient(mongo.host, mongo.port, **kwargs)


def get_database(client: MongoClient, settings: TodoSettings | None = None) -> Database:
    settings = settings or get_settings()
    return client[settings.database.name]


def build_repositories(
    client: MongoClient, settings: TodoSettings | None = None
) -> tuple[TaskRepository, TagRepository]:
    """Create the task and tag repositories over the configured collections."""
    settings = settings or get_settings()
    database = get_database(client, settings)
    return (
        TaskRepository(database[settings.database.tasks_collection]),
        TagRepository(database[settings.database.tags_collection]),
    )


def build_transaction_manager(
    client: MongoClient, settings: TodoSettings | None = None
) -> MongoTransactionManager:
    task_repository, tag_repository = build_repositories(client, settings)
    return MongoTransactionManager(client, task_repository, tag_repository)


def init_database(client: MongoClient, settings: TodoSettings | None = None) -> None:
    """Create the collections and their unique indexes.

    Safe to call multiple times - only creates what does not exist yet.
    """
    settings = settings or get_settings()
    database = get_database(client, settings)
    existing = set(database.list_collection_names())

    for name in (settings.database.tasks_collection, settings.database.tags_collection):
        if name not in existing:
            database.create_collection(name)
            logger.info(f"Created collection {settings.database.name}.{name}")

    database[settings.database.tasks_collection].create_index(
        [("id", ASCENDING)], unique=True
    )
    tags = database[settings.database.tags_collection]
    tags.create_index([("id", ASCENDING)], unique=True)
    tags.create_index([("name", ASCENDING)], unique=True)

    logger.info(f"Database {settings.database.name} initialized")


def verify_database(
    client: MongoClient, settings: TodoSettings | None = None
) -> dict[str, int] | None:
    """Ping the server and count the stored records.

    Returns:
        Record counts per collection, or None if the server is unreachable

    """
    try:
        client.admin.command("ping")
        task_repository, tag_repository = build_repositories(client, settings)
        counts = {"tasks": task_repository.count(), "tags": tag_repository.count()}
    except PyMongoError as e:
        logger.error(f"Database verification failed: {e}")
        return None

    logger.info(f"Database verification successful: {counts}")
    return counts


__all__ = [
    "build_repositories",
    "build_transaction_manager",
    "create_client",
    "get_database",
    "init_database",
    "verify_database",
]
