"""Task distribution analysis across Eisenhower quadrants - pure, no I/O."""

import math
from dataclasses import dataclass, field
from datetime import datetime

from .classifier import classify
from .tasks import Quadrant, Task

# Ideal share of open tasks per quadrant, with penalty factor and score weight
IDEAL_DISTRIBUTION = {
    Quadrant.DO: (10, 2, 0.3),
    Quadrant.DECIDE: (60, 1.5, 0.4),
    Quadrant.DELEGATE: (20, 2, 0.2),
    Quadrant.DELETE: (10, 3, 0.1),
}

GRADES = [
    (90, "A", "Excellent time management! You're focusing on the right priorities."),
    (80, "B", "Good balance, but consider moving more tasks to planning."),
    (70, "C", "Room for improvement. Focus more on important but not urgent tasks."),
    (60, "D", "Too reactive. Invest more time in planning and prevention."),
    (0, "F", "Crisis mode! Focus on urgent tasks, then plan better to prevent future crises."),
]


@dataclass
class DistributionReport:
    """Quadrant counts for open tasks plus derived insights."""

    distribution: dict[Quadrant, int]
    insights: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(self.distribution.values())

    def percentage(self, quadrant: Quadrant) -> float:
        """Share of open tasks in a quadrant, 0-100."""
        if not self.total:
            return 0.0
        return self.distribution[quadrant] / self.total * 100


@dataclass
class ProductivityScore:
    score: int
    grade: str
    feedback: str


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def empty_distribution() -> dict[Quadrant, int]:
    return {q: 0 for q in Quadrant}


def analyze_distribution(tasks: list[Task], as_of: datetime | None = None) -> DistributionReport:
    """
    Count open tasks per quadrant and flag unhealthy distributions.

    Pure function - no I/O. Every threshold is checked independently, so
    insights and recommendations accumulate in a fixed order.
    """
    as_of = as_of or datetime.now()
    distribution = empty_distribution()
    for task in tasks:
        if not task.completed:
            distribution[classify(task, as_of)] += 1

    report = DistributionReport(distribution=distribution)
    if report.total == 0:
        report.insights.append("No pending tasks - you're all caught up!")
        return report

    do = report.percentage(Quadrant.DO)
    decide = report.percentage(Quadrant.DECIDE)
    delegate = report.percentage(Quadrant.DELEGATE)
    delete = report.percentage(Quadrant.DELETE)

    if do > 40:
        report.insights.append(
            f"⚠️ You're in crisis mode with {distribution[Quadrant.DO]} urgent & important tasks "
            f"({round_half_up(do)}%)"
        )
        report.recommendations.append("Focus on clearing urgent tasks immediately")
        report.recommendations.append(
            "After clearing crises, invest time in planning to prevent future urgencies"
        )

    if decide > 50 and do < 20:
        report.insights.append(
            f"✅ Great balance! Most tasks ({round_half_up(decide)}%) are in the planning quadrant"
        )
        report.recommendations.append(
            "You're managing your time well - keep scheduling important tasks"
        )

    if delete > 30:
        report.insights.append(
            f"🗑️ {round_half_up(delete)}% of tasks are low-value - consider eliminating them"
        )
        report.recommendations.append("Review and delete unnecessary tasks to focus on what matters")

    if delegate > 25:
        report.insights.append(f"👥 {round_half_up(delegate)}% of tasks could be delegated")
        report.recommendations.append("Look for delegation or automation opportunities")

    # Reactive (urgent) vs proactive share
    if do + delegate > decide + delete:
        report.insights.append("📢 You're in reactive mode - most tasks are urgent")
        report.recommendations.append("Invest more time in proactive planning and prevention")

    return report


def compute_productivity_score(tasks: list[Task], as_of: datetime | None = None) -> ProductivityScore:
    """
    Score how close the open-task distribution is to the ideal 10/60/20/10 split.

    Pure function - no I/O.
    """
    report = analyze_distribution(tasks, as_of)
    if report.total == 0:
        return ProductivityScore(score=100, grade="A", feedback="Perfect! No pending tasks.")

    raw = 0.0
    for quadrant, (ideal, penalty, weight) in IDEAL_DISTRIBUTION.items():
        actual = report.percentage(quadrant)
        raw += max(0, 100 - abs(actual - ideal) * penalty) * weight
    score = round_half_up(raw)

    grade, feedback = next((g, f) for threshold, g, f in GRADES if score >= threshold)
    return ProductivityScore(score=score, grade=grade, feedback=feedback)
