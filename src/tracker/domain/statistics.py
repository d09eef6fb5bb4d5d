from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from datetime import date

from src.tracker.domain.models.priority import Priority
from src.tracker.domain.models.task import Task
from src.tracker.domain.models.task_statistics import TaskStatistics


def is_overdue(task: Task, today: date) -> bool:
    """An open task with a due date strictly before ``today``."""
    if task.completed or task.due_date is None:
        return False
    return task.due_date < today


def completion_rate(completed: int, total: int) -> float:
    if total == 0:
        return 0.0
    return completed / total * 100


def compute_statistics(tasks: Sequence[Task], today: date) -> TaskStatistics:
    """Aggregate a snapshot of tasks into a statistics summary.

    ``today`` is the reference date for overdue checks and is applied to
    every task alike.
    """
    if not tasks:
        return TaskStatistics.empty()

    total = len(tasks)
    completed = sum(1 for task in tasks if task.completed)
    urgent_active = sum(
        1 for task in tasks if not task.completed and task.priority == Priority.URGENT
    )
    overdue = sum(1 for task in tasks if is_overdue(task, today))
    by_priority = Counter(task.priority.value for task in tasks)
    by_category = Counter(task.category.value for task in tasks)

    return TaskStatistics(
        total=total,
        completed=completed,
        pending=total - completed,
        urgent_active=urgent_active,
        overdue=overdue,
        completion_rate=completion_rate(completed, total),
        by_priority=dict(by_priority),
        by_category=dict(by_category),
    )
