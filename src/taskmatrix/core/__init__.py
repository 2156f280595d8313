"""Functional core - pure business logic with no I/O."""

from .tasks import Quadrant, Subtask, Task
from .classifier import Inferred, Manual, classify, explain, is_important, is_urgent, quadrant_guide
from .analysis import DistributionReport, ProductivityScore, analyze_distribution, compute_productivity_score
from .planning import DailyPlan, QuadrantEstimate, estimate_time_by_quadrant, generate_daily_plan, suggest_my_day_tasks

__all__ = [
    # Tasks
    "Quadrant",
    "Subtask",
    "Task",
    # Classification
    "Inferred",
    "Manual",
    "classify",
    "explain",
    "is_important",
    "is_urgent",
    "quadrant_guide",
    # Analysis
    "DistributionReport",
    "ProductivityScore",
    "analyze_distribution",
    "compute_productivity_score",
    # Planning
    "DailyPlan",
    "QuadrantEstimate",
    "estimate_time_by_quadrant",
    "generate_daily_plan",
    "suggest_my_day_tasks",
]
