"""Ports - interfaces/protocols for external dependencies."""

from .task_repo import TaskRepository, TaskSourceError
from .journal_store import JournalStore

__all__ = [
    "TaskRepository",
    "TaskSourceError",
    "JournalStore",
]
