"""Pure task domain model - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class Quadrant(Enum):
    """Eisenhower matrix quadrant."""

    DO = "do"  # Important + urgent
    DECIDE = "decide"  # Important, not urgent
    DELEGATE = "delegate"  # Urgent, not important
    DELETE = "delete"  # Neither

    @property
    def label(self) -> str:
        """Human-readable quadrant label."""
        labels = {"do": "Do", "decide": "Schedule", "delegate": "Delegate", "delete": "Delete"}
        return labels[self.value]


@dataclass
class Subtask:
    """A checklist item inside a task."""

    title: str
    completed: bool = False


@dataclass
class Task:
    """A task as produced by the application's data layer."""

    title: str
    id: str = ""
    note: str = ""
    completed: bool = False
    important: bool = False
    my_day: bool = False
    urgent: bool | None = None
    due_date: datetime | None = None
    reminder_at: datetime | None = None
    subtasks: list[Subtask] = field(default_factory=list)
    eisenhower_quadrant: Quadrant | None = None
    created_at: datetime | None = None
    list_id: str = ""

    @classmethod
    def from_api(cls, data: dict) -> "Task":
        """Create Task from the app's JSON task shape (camelCase keys)."""
        title = data["title"]
        if not isinstance(title, str):
            raise ValueError(f"Task title must be a string, got {title!r}")
        quadrant = data.get("eisenhowerQuadrant")
        return cls(
            id=str(data.get("id", "")),
            title=title,
            note=data.get("note") or "",
            completed=bool(data.get("completed", False)),
            important=bool(data.get("important", False)),
            my_day=bool(data.get("myDay", False)),
            urgent=data.get("urgent"),
            due_date=parse_timestamp(data.get("dueDate")),
            reminder_at=parse_timestamp(data.get("reminderDateTime") or data.get("reminderAt")),
            subtasks=[
                Subtask(title=s.get("title", ""), completed=bool(s.get("completed", False)))
                for s in data.get("subtasks") or []
            ],
            eisenhower_quadrant=Quadrant(quadrant) if quadrant else None,
            created_at=parse_timestamp(data.get("createdAt")),
            list_id=data.get("listId", "") or "",
        )

    def to_dict(self) -> dict:
        """Serialize back to the camelCase JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "note": self.note,
            "completed": self.completed,
            "important": self.important,
            "myDay": self.my_day,
            "urgent": self.urgent,
            "dueDate": self.due_date.isoformat() if self.due_date else None,
            "reminderDateTime": self.reminder_at.isoformat() if self.reminder_at else None,
            "subtasks": [{"title": s.title, "completed": s.completed} for s in self.subtasks],
            "eisenhowerQuadrant": self.eisenhower_quadrant.value if self.eisenhower_quadrant else None,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "listId": self.list_id,
        }


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    if not value:
        return None
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
