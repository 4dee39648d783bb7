"""Service layer for the todo application use cases."""

from .todo_service import TodoService

__all__ = ["TodoService"]
