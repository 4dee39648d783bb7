"""Configuration settings for the todo application.

Settings are loaded with pydantic-settings from environment variables (prefix
``TODOAPP_``) and an optional ``.env`` file. Nested sections can be overridden
with the ``__`` delimiter, e.g. ``TODOAPP_DATABASE__NAME=todo_test``, or through
their own prefixes (``TODOAPP_MONGO_HOST``, ``TODOAPP_DB_NAME``...).
"""

import logging
from functools import lru_cache

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MongoSettings(BaseSettings):
    """MongoDB connection configuration."""

    model_config = SettingsConfigDict(env_prefix="TODOAPP_MONGO_")

    host: str = Field("localhost", min_length=1, description="MongoDB instance address")
    port: int = Field(27017, ge=1, le=65535, description="MongoDB instance port")
    uri: str | None = Field(
        None, description="Full connection string; overrides host and port when set"
    )
    replica_set: str | None = Field(
        None, description="Replica set name (transactions need a replica set)"
    )
    server_selection_timeout_ms: int = Field(
        5000, ge=100, le=120000, description="Server selection timeout (ms)"
    )

    @field_validator("uri")
    @classmethod
    def validate_uri(cls, v: str | None) -> str | None:
        """Accept only mongodb:// and mongodb+srv:// connection strings."""
        if v is not None and not v.startswith(("mongodb://", "mongodb+srv://")):
            raise ValueError("uri must start with mongodb:// or mongodb+srv://")
        return v


class DatabaseSettings(BaseSettings):
    """Database and collection names."""

    model_config = SettingsConfigDict(env_prefix="TODOAPP_DB_")

    name: str = Field("todoapp", min_length=1, description="Database name")
    tasks_collection: str = Field(
        "tasks", min_length=1, description="Tasks collection name"
    )
    tags_collection: str = Field(
        "tags", min_length=1, description="Tags collection name"
    )

    @model_validator(mode="after")
    def validate_collections(self) -> "DatabaseSettings":
        if self.tasks_collection == self.tags_collection:
            raise ValueError("Tasks and tags must be stored in different collections")
        return self


class TodoSettings(BaseSettings):
    """Root configuration combining all settings sections."""

    mongo: MongoSettings = Field(default_factory=MongoSettings)
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    log_level: str = Field(
        "WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        env_prefix="TODOAPP_",
        extra="ignore",
        validate_default=True,
        case_sensitive=False,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> TodoSettings:
    """Get cached global settings instance."""
    return TodoSettings()


__all__ = [
    "DatabaseSettings",
    "MongoSettings",
    "TodoSettings",
    "get_settings",
]
