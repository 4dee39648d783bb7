"""Record schemas shared by every layer of the application."""

from .models import Tag, Task, TodoRecord

__all__ = ["Tag", "Task", "TodoRecord"]
