from __future__ import annotations

from typing import Any

from src.tracker.domain.models.task import Task, TaskUpdate

_OVERRIDABLE_FIELDS = (
    "title",
    "description",
    "priority",
    "category",
    "due_date",
    "assigned_to",
)


def merge_task(existing: Task, partial: TaskUpdate) -> Task:
    """Apply ``partial`` onto ``existing`` and return the merged task.

    Fields left as ``None`` in the partial keep their stored value. Tags are
    replaced only by a non-empty set, so an empty set never clears them.
    ``completed`` is always taken from the partial. Identity, ownership and
    timestamps are never touched.
    """
    changes: dict[str, Any] = {}
    for name in _OVERRIDABLE_FIELDS:
        value = getattr(partial, name)
        if value is not None:
            changes[name] = value

    if partial.tags:
        changes["tags"] = set(partial.tags)

    changes["completed"] = partial.completed
    return existing.model_copy(update=changes, deep=True)
