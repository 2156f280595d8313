"""Eisenhower quadrant classification - pure, no I/O."""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta

from .tasks import Quadrant, Task

logger = logging.getLogger(__name__)

IMPORTANT_KEYWORDS = (
    "urgent", "critical", "important", "priority", "essential",
    "deadline", "meeting", "presentation", "review", "client",
    "boss", "manager", "project", "delivery", "launch",
)

URGENT_KEYWORDS = (
    "urgent", "asap", "immediately", "now", "today", "emergency",
    "fire", "blocker", "blocking", "stuck", "waiting", "quick",
    "fast", "rush", "expedite",
)

# Subtask count at which a task is considered complex enough to matter
COMPLEX_SUBTASK_COUNT = 3
IMPORTANT_WITHIN_DAYS = 7


@dataclass(frozen=True)
class Manual:
    """Quadrant assigned explicitly on the task."""

    quadrant: Quadrant


@dataclass(frozen=True)
class Inferred:
    """Quadrant derived from the importance/urgency heuristic."""

    quadrant: Quadrant
    important: bool
    urgent: bool


Classification = Manual | Inferred


@dataclass(frozen=True)
class QuadrantGuide:
    """Fixed coaching text for a quadrant."""

    title: str
    description: str
    actions: tuple[str, ...] = ()


_GUIDES = {
    Quadrant.DO: QuadrantGuide(
        title="Do First (Crisis Management)",
        description="Handle these immediately - they're both important and urgent",
        actions=(
            "Work on these tasks right now",
            "Clear your schedule for these priorities",
            "Minimize distractions while working",
            "Consider if any can be prevented in the future",
        ),
    ),
    Quadrant.DECIDE: QuadrantGuide(
        title="Schedule (Prevention & Planning)",
        description="Plan and schedule these important tasks to prevent them from becoming urgent",
        actions=(
            "Schedule dedicated time blocks",
            "Set deadlines and reminders",
            "Break large tasks into smaller steps",
            "This is where you should spend most of your time",
        ),
    ),
    Quadrant.DELEGATE: QuadrantGuide(
        title="Delegate (Interruptions)",
        description="These tasks are urgent but not important to you personally",
        actions=(
            "Delegate to team members",
            "Automate if possible",
            "Set boundaries and time limits",
            "Question if they're really necessary",
        ),
    ),
    Quadrant.DELETE: QuadrantGuide(
        title="Don't Do (Time Wasters)",
        description="These tasks provide little value and should be eliminated",
        actions=(
            "Delete or cancel these tasks",
            "Say no to similar requests in the future",
            "Use as break activities if you must do them",
            "Question why they exist at all",
        ),
    ),
}


def align(value: datetime, as_of: datetime) -> datetime:
    """Express value in the same timezone flavour as as_of so they compare."""
    if value.tzinfo is not None and as_of.tzinfo is not None:
        return value.astimezone(as_of.tzinfo)
    if value.tzinfo is not None:
        # Naive as_of is local wall time
        return value.astimezone().replace(tzinfo=None)
    if as_of.tzinfo is not None:
        return value.replace(tzinfo=as_of.tzinfo)
    return value


def days_between(as_of: datetime, target: datetime) -> int:
    """Whole days from as_of to target, truncated toward zero (negative if past)."""
    seconds = (align(target, as_of) - as_of).total_seconds()
    return int(seconds / 86400)


def _is_same_day(value: datetime, as_of: datetime, offset: int = 0) -> bool:
    return align(value, as_of).date() == as_of.date() + timedelta(days=offset)


def _is_past(value: datetime, as_of: datetime) -> bool:
    return align(value, as_of) < as_of


def has_keyword(task: Task, keywords: tuple[str, ...]) -> bool:
    """Case-insensitive substring match against title, then note."""
    title = task.title.lower()
    note = (task.note or "").lower()
    return any(k in title or k in note for k in keywords)


def is_important(task: Task, as_of: datetime | None = None) -> bool:
    """Flags, My Day, keywords, complexity or a due date within a week."""
    as_of = as_of or datetime.now()

    if task.important or task.my_day:
        return True

    if has_keyword(task, IMPORTANT_KEYWORDS):
        return True

    if len(task.subtasks) >= COMPLEX_SUBTASK_COUNT:
        return True

    if task.due_date:
        days = days_between(as_of, task.due_date)
        if 0 <= days <= IMPORTANT_WITHIN_DAYS:
            return True

    return False


def is_urgent(task: Task, as_of: datetime | None = None) -> bool:
    """Flag, overdue, due today/tomorrow, keywords or a reminder that is due."""
    as_of = as_of or datetime.now()

    if task.urgent:
        return True

    if task.due_date:
        if _is_past(task.due_date, as_of) and not task.completed:
            return True
        if _is_same_day(task.due_date, as_of) or _is_same_day(task.due_date, as_of, offset=1):
            return True

    if has_keyword(task, URGENT_KEYWORDS):
        return True

    if task.reminder_at:
        if _is_same_day(task.reminder_at, as_of) or _is_past(task.reminder_at, as_of):
            return True

    return False


def explain(task: Task, as_of: datetime | None = None) -> Classification:
    """
    Classify a task and report where the quadrant came from.

    A manually assigned quadrant always wins and the heuristic is skipped.

    Q1: Urgent + Important (Do)
    Q2: Not Urgent + Important (Decide)
    Q3: Urgent + Not Important (Delegate)
    Q4: Not Urgent + Not Important (Delete)
    """
    if task.eisenhower_quadrant is not None:
        return Manual(task.eisenhower_quadrant)

    as_of = as_of or datetime.now()
    important = is_important(task, as_of)
    urgent = is_urgent(task, as_of)

    if important and urgent:
        quadrant = Quadrant.DO
    elif important and not urgent:
        quadrant = Quadrant.DECIDE
    elif urgent and not important:
        quadrant = Quadrant.DELEGATE
    else:
        quadrant = Quadrant.DELETE

    logger.debug("Classified %r as %s (important=%s, urgent=%s)", task.title, quadrant.value, important, urgent)
    return Inferred(quadrant, important, urgent)


def classify(task: Task, as_of: datetime | None = None) -> Quadrant:
    """Eisenhower quadrant for a task."""
    return explain(task, as_of).quadrant


def quadrant_guide(quadrant: Quadrant) -> QuadrantGuide:
    """Actionable guidance for working a quadrant."""
    return _GUIDES[quadrant]
