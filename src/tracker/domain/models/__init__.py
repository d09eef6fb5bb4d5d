from src.tracker.domain.models.category import Category
from src.tracker.domain.models.priority import Priority
from src.tracker.domain.models.task import Task, TaskUpdate
from src.tracker.domain.models.task_draft import TaskDraft
from src.tracker.domain.models.task_snapshot import TaskSnapshot
from src.tracker.domain.models.task_statistics import TaskStatistics

__all__ = [
    "Task",
    "TaskUpdate",
    "TaskDraft",
    "Priority",
    "Category",
    "TaskSnapshot",
    "TaskStatistics",
]
