import httpx
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from src.tracker.infrastructure.http.task_source import HttpTaskSource


class TaskSourceSettings(BaseSettings):
    """Location of the remote task service read by the statistics side."""
    TASK_SERVICE_URL: str = "http://task-service:8081"
    TASK_SERVICE_TIMEOUT_SECONDS: float = 5.0
    TASKS_PATH: str = "/api/tasks"
    HEALTH_PATH: str = "/api/tasks/health"
    UP_MARKER: str = "UP"

    model_config = ConfigDict(env_file=".env", extra="ignore")


def get_task_source_settings() -> TaskSourceSettings:
    """Return a fresh task source settings instance."""
    return TaskSourceSettings()


def build_task_source(
    settings: TaskSourceSettings | None = None,
    client: httpx.Client | None = None,
) -> HttpTaskSource:
    """Create an HTTP task source bound to its own client."""
    if settings is None:
        settings = get_task_source_settings()
    if client is None:
        client = httpx.Client(
            base_url=settings.TASK_SERVICE_URL,
            timeout=settings.TASK_SERVICE_TIMEOUT_SECONDS,
        )
    return HttpTaskSource(
        client,
        tasks_path=settings.TASKS_PATH,
        health_path=settings.HEALTH_PATH,
        up_marker=settings.UP_MARKER,
    )
