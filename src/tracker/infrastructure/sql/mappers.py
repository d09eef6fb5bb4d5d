from __future__ import annotations

from datetime import UTC, datetime

from src.tracker.domain.models.task import Task
from src.tracker.infrastructure.sql.orm import TaskRow, TaskTagRow


class OrmMapper:
    @staticmethod
    def to_task_row(task: Task) -> TaskRow:
        if task.id is None:
            raise ValueError("Task id is required to persist TaskRow.")
        row = TaskRow(id=task.id)
        OrmMapper.apply_to_row(row, task)
        return row

    @staticmethod
    def apply_to_row(row: TaskRow, task: Task) -> None:
        row.title = task.title
        row.description = task.description
        row.priority = task.priority
        row.category = task.category
        row.due_date = task.due_date
        row.assigned_to = task.assigned_to
        row.user_id = task.user_id
        row.completed = task.completed
        row.created_at = task.created_at
        row.updated_at = task.updated_at
        OrmMapper.sync_tag_rows(row, task.tags)

    @staticmethod
    def sync_tag_rows(row: TaskRow, tags: set[str]) -> None:
        # Keep rows for surviving tags so the (task_id, tag) keys are not re-inserted.
        kept = [tag_row for tag_row in row.tags if tag_row.tag in tags]
        present = {tag_row.tag for tag_row in kept}
        added = [TaskTagRow(task_id=row.id, tag=tag) for tag in sorted(tags - present)]
        row.tags = kept + added

    @staticmethod
    def to_domain_task(row: TaskRow) -> Task:
        return Task(
            id=row.id,
            title=row.title,
            description=row.description,
            priority=row.priority,
            category=row.category,
            due_date=row.due_date,
            tags={tag_row.tag for tag_row in row.tags},
            assigned_to=row.assigned_to,
            user_id=row.user_id,
            completed=row.completed,
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite drops tzinfo; stored values are always written in UTC.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)
