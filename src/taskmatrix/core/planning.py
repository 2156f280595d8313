"""My Day suggestions, daily plans and time estimates - pure, no I/O."""

from dataclasses import dataclass, field
from datetime import datetime

from .classifier import align, classify
from .tasks import Quadrant, Task

BASE_HOURS = 1.0
SUBTASK_HOURS = 0.5
LONG_NOTE_HOURS = 0.5
IMPORTANT_HOURS = 0.5
LONG_NOTE_CHARS = 100

DAILY_SUGGESTIONS = [
    "Start with your most important task when energy is highest",
    "Batch similar tasks together for efficiency",
    "Take breaks between intense focus sessions",
    "Review progress and plan tomorrow before ending the day",
]


@dataclass
class DailyPlan:
    """Open tasks split across the day by energy level."""

    morning: list[Task] = field(default_factory=list)
    afternoon: list[Task] = field(default_factory=list)
    evening: list[Task] = field(default_factory=list)
    suggestions: list[str] = field(default_factory=list)


@dataclass
class QuadrantEstimate:
    total_tasks: int = 0
    estimated_hours: float = 0.0
    recommendation: str = ""


def bucket_by_quadrant(tasks: list[Task], as_of: datetime | None = None) -> dict[Quadrant, list[Task]]:
    """
    Group open tasks by quadrant, preserving input order.

    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    buckets: dict[Quadrant, list[Task]] = {q: [] for q in Quadrant}
    for task in tasks:
        if not task.completed:
            buckets[classify(task, as_of)].append(task)
    return buckets


def suggest_my_day_tasks(
    tasks: list[Task],
    limit: int = 5,
    as_of: datetime | None = None,
) -> list[Task]:
    """
    Pick open Do/Decide tasks that aren't in My Day yet.

    Do before Decide, then soonest due date (undated last), then newest first.
    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    candidates = []
    for task in tasks:
        if task.completed or task.my_day:
            continue
        quadrant = classify(task, as_of)
        if quadrant in (Quadrant.DO, Quadrant.DECIDE):
            candidates.append((quadrant, task))

    def sort_key(item: tuple[Quadrant, Task]) -> tuple:
        quadrant, t = item
        due = align(t.due_date, as_of).timestamp() if t.due_date else 0.0
        created = align(t.created_at, as_of).timestamp() if t.created_at else 0.0
        return (
            quadrant != Quadrant.DO,
            t.due_date is None,
            due,
            t.created_at is None,
            # Negative for descending sort
            -created,
        )

    return [t for _, t in sorted(candidates, key=sort_key)][:limit]


def generate_daily_plan(tasks: list[Task], as_of: datetime | None = None) -> DailyPlan:
    """
    Spread open tasks over morning, afternoon and evening.

    Morning takes up to 2 Do and 3 Decide tasks, afternoon up to 3 Delegate
    and the next 2 Decide, evening up to 3 of Delete and leftover Decide.
    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    matrix = bucket_by_quadrant(tasks, as_of)
    do = matrix[Quadrant.DO]
    decide = matrix[Quadrant.DECIDE]

    def morning_key(t: Task) -> tuple:
        # Dated tasks by due date, then undated with important ones first
        if t.due_date:
            return (0, align(t.due_date, as_of).timestamp(), False)
        return (1, 0.0, not t.important)

    morning = sorted(do[:2] + decide[:3], key=morning_key)
    afternoon = matrix[Quadrant.DELEGATE][:3] + decide[3:5]
    evening = (matrix[Quadrant.DELETE][:2] + decide[5:])[:3]

    suggestions = list(DAILY_SUGGESTIONS)
    if len(do) > 3:
        suggestions.insert(0, "⚠️ Too many urgent tasks - consider what could have been prevented")
    if len(decide) > len(do) * 3:
        suggestions.append("✅ Great focus on planning - this prevents future crises")

    return DailyPlan(morning=morning, afternoon=afternoon, evening=evening, suggestions=suggestions)


def estimate_hours(task: Task) -> float:
    """Rough effort estimate from task complexity."""
    hours = BASE_HOURS + len(task.subtasks) * SUBTASK_HOURS
    if len(task.note or "") > LONG_NOTE_CHARS:
        hours += LONG_NOTE_HOURS
    if task.important:
        hours += IMPORTANT_HOURS
    return hours


def estimate_time_by_quadrant(
    tasks: list[Task],
    as_of: datetime | None = None,
) -> dict[Quadrant, QuadrantEstimate]:
    """
    Total open tasks and estimated hours per quadrant, with a verdict for each.

    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    result = {q: QuadrantEstimate() for q in Quadrant}

    for task in tasks:
        if task.completed:
            continue
        estimate = result[classify(task, as_of)]
        estimate.total_tasks += 1
        estimate.estimated_hours += estimate_hours(task)

    do = result[Quadrant.DO]
    do.recommendation = (
        "Too much urgent work - delegate or eliminate some tasks"
        if do.estimated_hours > 4
        else "Manageable urgent workload"
    )
    decide = result[Quadrant.DECIDE]
    decide.recommendation = (
        "Break planning tasks into smaller chunks"
        if decide.estimated_hours > 8
        else "Good amount of strategic work"
    )
    delegate = result[Quadrant.DELEGATE]
    delegate.recommendation = (
        "Consider delegating these tasks to others"
        if delegate.total_tasks > 0
        else "No delegation opportunities identified"
    )
    delete = result[Quadrant.DELETE]
    delete.recommendation = (
        "Consider eliminating these low-value tasks"
        if delete.total_tasks > 0
        else "No time-wasting tasks identified"
    )

    return result
