"""Route modules for the Taskboard API."""
from . import auth, health, reports, tasks

__all__ = ["auth", "health", "reports", "tasks"]
