"""SQLAlchemy models exposed for metadata creation and imports."""
from .task import Task, TaskStatus
from .user import User, UserRole

__all__ = ["User", "UserRole", "Task", "TaskStatus"]
