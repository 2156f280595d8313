"""Pure report formatting - no I/O dependencies."""

from datetime import datetime

from .analysis import DistributionReport, ProductivityScore
from .classifier import align, classify
from .planning import DailyPlan, QuadrantEstimate
from .tasks import Quadrant, Task


def format_task_line(task: Task, as_of: datetime | None = None) -> str:
    """
    Format a single task for display.

    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    quadrant = classify(task, as_of)

    details = []
    if task.due_date:
        due = align(task.due_date, as_of)
        if due.date() == as_of.date():
            details.append("due TODAY")
        elif due < as_of:
            details.append(f"OVERDUE by {(as_of.date() - due.date()).days}d")
        else:
            details.append(f"due in {(due.date() - as_of.date()).days}d")
    if task.my_day:
        details.append("My Day")

    suffix = f" ({', '.join(details)})" if details else ""
    return f"- [{quadrant.label}] {task.title}{suffix}"


def _task_list_md(tasks: list[Task], as_of: datetime) -> str:
    return "\n".join(format_task_line(t, as_of) for t in tasks) or "None"


def format_distribution(report: DistributionReport) -> str:
    """
    Format a distribution report as markdown.

    Pure function - no I/O.
    """
    lines = ["### Distribution"]
    for quadrant in Quadrant:
        count = report.distribution[quadrant]
        lines.append(f"- {quadrant.label}: {count} ({report.percentage(quadrant):.0f}%)")

    lines += ["", "### Insights"]
    lines += [f"- {i}" for i in report.insights] or ["None"]

    lines += ["", "### Recommendations"]
    lines += [f"- {r}" for r in report.recommendations] or ["None"]
    return "\n".join(lines)


def format_score(score: ProductivityScore) -> str:
    return f"Score: {score.score}/100 (grade {score.grade})\n{score.feedback}"


def format_plan(plan: DailyPlan, as_of: datetime | None = None) -> str:
    """
    Format a daily plan as markdown sections.

    Pure function - no I/O.
    """
    as_of = as_of or datetime.now()
    suggestions_md = "\n".join(f"- {s}" for s in plan.suggestions)
    return f"""### Morning
{_task_list_md(plan.morning, as_of)}

### Afternoon
{_task_list_md(plan.afternoon, as_of)}

### Evening
{_task_list_md(plan.evening, as_of)}

### Suggestions
{suggestions_md}"""


def format_estimates(estimates: dict[Quadrant, QuadrantEstimate]) -> str:
    lines = []
    for quadrant, est in estimates.items():
        lines.append(
            f"- {quadrant.label}: {est.total_tasks} tasks, ~{est.estimated_hours:g}h - {est.recommendation}"
        )
    return "\n".join(lines)
