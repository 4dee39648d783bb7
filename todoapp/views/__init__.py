"""Views presenting the todo application state."""

from .base import TodoView
from .console import ConsoleTodoView

__all__ = ["ConsoleTodoView", "TodoView"]
