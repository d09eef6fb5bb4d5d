from __future__ import annotations

import logging

import httpx
from pydantic import TypeAdapter, ValidationError

from src.tracker.domain.exceptions import SourceUnavailableError
from src.tracker.domain.models.task import Task
from src.tracker.domain.models.task_snapshot import TaskSnapshot
from src.tracker.domain.repositories import TaskSource

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(list[Task])


class HttpTaskSource(TaskSource):
    """Reads the task collection from a remote task service over HTTP.

    Every call is a single attempt with no retry and no cached fallback.
    Failures never leave this class: reads degrade to an unavailable
    snapshot and availability checks to ``False``.
    """

    def __init__(
        self,
        client: httpx.Client,
        *,
        tasks_path: str = "/api/tasks",
        health_path: str = "/api/tasks/health",
        up_marker: str = "UP",
    ) -> None:
        self._client = client
        self._tasks_path = tasks_path
        self._health_path = health_path
        self._up_marker = up_marker

    def fetch_snapshot(self) -> TaskSnapshot:
        logger.info("Fetching tasks from task service", extra={"path": self._tasks_path})
        try:
            tasks = self._read_tasks()
        except SourceUnavailableError as exc:
            logger.error(
                "Failed to fetch tasks from task service: %s", exc, exc_info=exc.__cause__
            )
            return TaskSnapshot.unavailable(str(exc))
        logger.info("Received tasks from task service", extra={"count": len(tasks)})
        return TaskSnapshot.of(tasks)

    def fetch_all(self) -> list[Task]:
        return self.fetch_snapshot().tasks

    def is_available(self) -> bool:
        try:
            response = self._client.get(self._health_path)
            response.raise_for_status()
            body = response.text
        except Exception as exc:
            logger.warning("Task service unavailable: %s", exc)
            return False
        available = self._up_marker in body
        logger.info("Task service available: %s", available)
        return available

    def _read_tasks(self) -> list[Task]:
        try:
            response = self._client.get(self._tasks_path)
            response.raise_for_status()
        except Exception as exc:
            raise SourceUnavailableError(f"request failed: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise SourceUnavailableError("response body is not valid JSON") from exc
        if payload is None:
            return []
        try:
            return _TASK_LIST.validate_python(payload)
        except ValidationError as exc:
            raise SourceUnavailableError("response does not match the task schema") from exc
