from __future__ import annotations

from typing import Protocol

from src.tracker.domain.models.task import Task
from src.tracker.domain.models.task_snapshot import TaskSnapshot


class TaskStore(Protocol):
    """Repository contract for persisting and reading tasks."""

    def find_by_id(self, task_id: str) -> Task | None:
        """Return the task identified by ``task_id``, or ``None`` when absent."""

    def save(self, task: Task) -> Task:
        """Insert or update a task; assigns id and timestamps on first save."""

    def delete_by_id(self, task_id: str) -> bool:
        """Delete a task and report whether a record was removed."""

    def find_all(self) -> list[Task]:
        """Return every stored task."""

    def find_by_owner(self, user_id: str) -> list[Task]:
        """Return the tasks owned by ``user_id``."""


class TaskSource(Protocol):
    """Read-only access to the full task collection held by another service."""

    def fetch_snapshot(self) -> TaskSnapshot:
        """Read the whole collection once; never raises."""

    def fetch_all(self) -> list[Task]:
        """Read the whole collection once; empty when the source fails."""

    def is_available(self) -> bool:
        """Check the source for liveness; never raises."""
