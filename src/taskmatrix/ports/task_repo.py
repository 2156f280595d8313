"""Task repository interface."""

from typing import Protocol

from taskmatrix.core.tasks import Task


class TaskSourceError(Exception):
    """Raised when tasks cannot be loaded from a backend."""

    pass


class TaskRepository(Protocol):
    """Interface for fetching tasks from any backend."""

    def fetch_all(self) -> list[Task]:
        """Fetch all tasks."""
        ...
