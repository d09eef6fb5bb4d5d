from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Path, Response, status
from pydantic import BaseModel, Field

from src.tracker.application.services import TaskService
from src.tracker.domain.models import Task, TaskUpdate
from src.tracker.presentation.errors import ErrorResponse

router = APIRouter(prefix="/api/tasks", tags=["tasks"])
logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    message: str = Field(description="Service description.")
    status: str = Field(description="Liveness marker.")


def get_task_service() -> TaskService:
    return TaskService()


@router.get(
    "",
    response_model=list[Task],
    summary="List tasks",
)
def list_tasks(service: TaskService = Depends(get_task_service)):
    tasks = service.list_tasks()
    logger.debug("Returning tasks", extra={"count": len(tasks)})
    return tasks


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Task service health check",
)
def health():
    return HealthResponse(message="Task Service is running", status="UP")


@router.get(
    "/user/{user_id}",
    response_model=list[Task],
    summary="List tasks owned by a user",
)
def list_tasks_for_user(
    user_id: str = Path(..., pattern=r"^[a-zA-Z0-9_-]{3,50}$", description="Owner id"),
    service: TaskService = Depends(get_task_service),
):
    return service.list_tasks_for_user(user_id)


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Get a task",
    responses={404: {"model": ErrorResponse}},
)
def get_task(task_id: str, service: TaskService = Depends(get_task_service)):
    return service.get_task(task_id)


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Create a task",
    responses={400: {"model": ErrorResponse}},
)
def create_task(
    task: Task,
    response: Response,
    service: TaskService = Depends(get_task_service),
):
    saved = service.create_task(task)
    response.headers["Location"] = f"{router.prefix}/{saved.id}"
    return saved


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Partially update a task",
    description=(
        "Fields omitted or null keep their stored value. An empty tag list keeps the "
        "stored tags. `completed` is always applied and defaults to false."
    ),
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_task(
    task_id: str,
    partial: TaskUpdate,
    service: TaskService = Depends(get_task_service),
):
    return service.merge_update(task_id, partial)


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a task",
    responses={404: {"model": ErrorResponse}},
)
def delete_task(task_id: str, service: TaskService = Depends(get_task_service)):
    service.delete_task(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
