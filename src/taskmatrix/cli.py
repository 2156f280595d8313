"""taskmatrix CLI - Eisenhower matrix for your task list."""

import json
import logging
import sys
from datetime import datetime

import click

from .config import load_config
from .core.analysis import analyze_distribution, compute_productivity_score
from .core.classifier import Manual, explain, quadrant_guide
from .core.planning import estimate_time_by_quadrant, generate_daily_plan, suggest_my_day_tasks
from .core.report import format_distribution, format_estimates, format_plan, format_score, format_task_line
from .core.tasks import Quadrant, Task
from .ports.task_repo import TaskSourceError
from .workflows import get_repository, resolve_now, save_plan


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """taskmatrix - Eisenhower matrix task analysis."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


def task_options(func):
    """Options shared by every command that reads tasks."""
    func = click.option("--json", "as_json", is_flag=True, help="Output as JSON")(func)
    func = click.option("--as-of", default=None, help="Evaluate as of this ISO timestamp")(func)
    func = click.option("--file", "-f", "tasks_file", default=None, help="Read tasks from this JSON file")(func)
    return func


def _load(tasks_file: str | None, as_of: str | None) -> tuple[list[Task], datetime]:
    """Load tasks and "now", exiting with an error message on failure."""
    config = load_config()
    try:
        now = resolve_now(config, as_of)
    except ValueError:
        click.echo(f"Error: invalid --as-of timestamp: {as_of}", err=True)
        sys.exit(1)

    try:
        tasks = get_repository(config, tasks_file).fetch_all()
    except TaskSourceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    return tasks, now


def _task_summary(task: Task) -> dict:
    return {
        "id": task.id,
        "title": task.title,
        "due_date": task.due_date.isoformat() if task.due_date else None,
    }


@main.command()
@task_options
def classify(tasks_file: str | None, as_of: str | None, as_json: bool):
    """Show the quadrant of every open task."""
    tasks, now = _load(tasks_file, as_of)
    open_tasks = [t for t in tasks if not t.completed]

    results = [(t, explain(t, now)) for t in open_tasks]
    if as_json:
        click.echo(
            json.dumps(
                [
                    {
                        **_task_summary(t),
                        "quadrant": c.quadrant.value,
                        "source": "manual" if isinstance(c, Manual) else "inferred",
                    }
                    for t, c in results
                ],
                indent=2,
            )
        )
        return

    if not results:
        click.echo("No pending tasks.")
        return

    for quadrant in Quadrant:
        group = [(t, c) for t, c in results if c.quadrant == quadrant]
        if not group:
            continue
        click.echo(f"### {quadrant.label} ({len(group)})")
        for task, classification in group:
            marker = " *" if isinstance(classification, Manual) else ""
            click.echo(f"{format_task_line(task, now)}{marker}")
        click.echo()


@main.command()
@task_options
def analyze(tasks_file: str | None, as_of: str | None, as_json: bool):
    """Analyze how open tasks spread across quadrants."""
    tasks, now = _load(tasks_file, as_of)
    report = analyze_distribution(tasks, now)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "distribution": {q.value: n for q, n in report.distribution.items()},
                    "insights": report.insights,
                    "recommendations": report.recommendations,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        click.echo(format_distribution(report))


@main.command()
@task_options
def score(tasks_file: str | None, as_of: str | None, as_json: bool):
    """Grade the task distribution against the ideal split."""
    tasks, now = _load(tasks_file, as_of)
    result = compute_productivity_score(tasks, now)

    if as_json:
        click.echo(
            json.dumps({"score": result.score, "grade": result.grade, "feedback": result.feedback}, indent=2)
        )
    else:
        click.echo(format_score(result))


@main.command()
@task_options
@click.option("--limit", "-n", type=int, default=None, help="Maximum suggestions (default: MY_DAY_LIMIT)")
def suggest(tasks_file: str | None, as_of: str | None, as_json: bool, limit: int | None):
    """Suggest tasks to add to My Day."""
    tasks, now = _load(tasks_file, as_of)
    if limit is None:
        limit = load_config().my_day_limit
    suggestions = suggest_my_day_tasks(tasks, limit=limit, as_of=now)

    if as_json:
        click.echo(json.dumps([_task_summary(t) for t in suggestions], indent=2))
        return

    if not suggestions:
        click.echo("Nothing to add to My Day.")
        return

    for task in suggestions:
        click.echo(format_task_line(task, now))


@main.command()
@task_options
@click.option("--save", is_flag=True, help="Append the plan to today's journal")
def plan(tasks_file: str | None, as_of: str | None, as_json: bool, save: bool):
    """Plan the day across morning, afternoon and evening."""
    tasks, now = _load(tasks_file, as_of)
    daily_plan = generate_daily_plan(tasks, now)

    if as_json:
        click.echo(
            json.dumps(
                {
                    "morning": [_task_summary(t) for t in daily_plan.morning],
                    "afternoon": [_task_summary(t) for t in daily_plan.afternoon],
                    "evening": [_task_summary(t) for t in daily_plan.evening],
                    "suggestions": daily_plan.suggestions,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
    else:
        click.echo(format_plan(daily_plan, now))

    if save:
        path = save_plan(load_config(), daily_plan, now)
        click.echo(f"\n✓ Plan saved to {path}", err=as_json)


@main.command()
@task_options
def estimate(tasks_file: str | None, as_of: str | None, as_json: bool):
    """Estimate hours of open work per quadrant."""
    tasks, now = _load(tasks_file, as_of)
    estimates = estimate_time_by_quadrant(tasks, now)

    if as_json:
        click.echo(
            json.dumps(
                {
                    q.value: {
                        "total_tasks": e.total_tasks,
                        "estimated_hours": e.estimated_hours,
                        "recommendation": e.recommendation,
                    }
                    for q, e in estimates.items()
                },
                indent=2,
            )
        )
    else:
        click.echo(format_estimates(estimates))


@main.command()
@click.argument("quadrant", type=click.Choice([q.value for q in Quadrant]))
def guide(quadrant: str):
    """Show how to work a quadrant."""
    info = quadrant_guide(Quadrant(quadrant))
    click.echo(f"{info.title}\n{info.description}\n")
    for action in info.actions:
        click.echo(f"- {action}")


if __name__ == "__main__":
    main()
