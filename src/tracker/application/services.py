import logging
from collections.abc import Callable
from datetime import date
from typing import cast

import inject

from src.tracker.domain.exceptions import TaskNotFoundError
from src.tracker.domain.merge import merge_task
from src.tracker.domain.models import Task, TaskSnapshot, TaskStatistics, TaskUpdate
from src.tracker.domain.repositories import TaskSource, TaskStore
from src.tracker.domain.statistics import compute_statistics
from src.tracker.domain.validation import TaskValidator

logger = logging.getLogger(__name__)


class TaskService:
    """Creates, reads, updates and deletes tasks held by the task store."""

    def __init__(
        self,
        store: TaskStore | None = None,
        validator: TaskValidator | None = None,
    ) -> None:
        self._store = store or cast(TaskStore, inject.instance(TaskStore))
        self._validator = validator or TaskValidator()

    def create_task(self, task: Task) -> Task:
        """Validate a new task and persist it; the store assigns id and timestamps."""
        candidate = task.model_copy(update={"id": None, "created_at": None, "updated_at": None})
        self._validator.validate(candidate).raise_for_errors()
        saved = self._store.save(candidate)
        logger.info("Task created", extra={"task_id": saved.id})
        return saved

    def get_task(self, task_id: str) -> Task:
        logger.debug("Looking up task", extra={"task_id": task_id})
        task = self._store.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def list_tasks(self) -> list[Task]:
        return self._store.find_all()

    def list_tasks_for_user(self, user_id: str) -> list[Task]:
        logger.debug("Listing tasks for user", extra={"user_id": user_id})
        return self._store.find_by_owner(user_id)

    def merge_update(self, task_id: str, partial: TaskUpdate) -> Task:
        """
        Apply a partial update onto the stored task identified by ``task_id``.

        Raises ``TaskNotFoundError`` before anything is written when the id does
        not resolve. The merged record is validated before it is saved.
        """
        existing = self._store.find_by_id(task_id)
        if existing is None:
            logger.warning("Update requested for unknown task", extra={"task_id": task_id})
            raise TaskNotFoundError(task_id)
        merged = merge_task(existing, partial)
        self._validator.validate(merged).raise_for_errors()
        updated = self._store.save(merged)
        logger.info("Task updated", extra={"task_id": task_id})
        return updated

    def delete_task(self, task_id: str) -> None:
        if not self._store.delete_by_id(task_id):
            raise TaskNotFoundError(task_id)
        logger.info("Task deleted", extra={"task_id": task_id})


class StatisticsService:
    """Computes task statistics over a fresh snapshot from the task source."""

    def __init__(
        self,
        source: TaskSource | None = None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        self._source = source or cast(TaskSource, inject.instance(TaskSource))
        self._clock = clock

    def compute_statistics(self) -> TaskStatistics:
        """Return statistics for the current collection; empty when the source is down."""
        snapshot = self._take_snapshot()
        if not snapshot.available:
            logger.warning(
                "Task source unavailable, returning empty statistics",
                extra={"reason": snapshot.reason},
            )
            return TaskStatistics.empty()
        if not snapshot.tasks:
            logger.info("No tasks found to compute statistics")
            return TaskStatistics.empty()

        try:
            statistics = compute_statistics(snapshot.tasks, self._clock())
        except Exception:
            logger.exception("Statistics aggregation failed, returning empty statistics")
            return TaskStatistics.empty()
        logger.info(
            "Statistics computed: %d tasks, %.2f%% completed",
            statistics.total,
            statistics.completion_rate,
        )
        return statistics

    def is_source_available(self) -> bool:
        try:
            return self._source.is_available()
        except Exception:
            logger.exception("Task source availability check failed")
            return False

    def _take_snapshot(self) -> TaskSnapshot:
        try:
            return self._source.fetch_snapshot()
        except Exception as exc:
            logger.exception("Task source raised while fetching tasks")
            return TaskSnapshot.unavailable(str(exc))
