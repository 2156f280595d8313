"""JSON file task adapter - reads an exported task list."""

import json
import logging
from pathlib import Path

from taskmatrix.core.tasks import Task
from taskmatrix.ports.task_repo import TaskSourceError

logger = logging.getLogger(__name__)


def parse_tasks(data: list | dict, source: str) -> list[Task]:
    """Build tasks from a bare list or a {"tasks": [...]} / {"data": [...]} envelope."""
    if isinstance(data, dict):
        data = data.get("tasks", data.get("data"))
    if not isinstance(data, list):
        raise TaskSourceError(f"Expected a list of tasks in {source}")

    tasks = []
    for i, item in enumerate(data):
        try:
            tasks.append(Task.from_api(item))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise TaskSourceError(f"Malformed task #{i} in {source}: {e!r}") from e
    return tasks


class JsonFileTaskRepository:
    """
    File-based task source.

    Implements TaskRepository protocol. Accepts the JSON the app exports:
    either a list of task objects or an object with a "tasks" key.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path).expanduser()

    def fetch_all(self) -> list[Task]:
        """Load all tasks from the file."""
        if not self.path.exists():
            raise TaskSourceError(f"Tasks file not found: {self.path}")

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise TaskSourceError(f"Invalid JSON in {self.path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise TaskSourceError(f"Could not read {self.path}: {e}") from e

        tasks = parse_tasks(data, str(self.path))
        logger.debug("Loaded %d tasks from %s", len(tasks), self.path)
        return tasks
