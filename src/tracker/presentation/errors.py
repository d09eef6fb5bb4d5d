from __future__ import annotations

import logging
from datetime import UTC, datetime

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from src.tracker.domain.exceptions import TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    timestamp: datetime = Field(description="When the error was produced.")
    status: int = Field(description="HTTP status code.")
    error: str = Field(description="Stable error code.")
    message: str = Field(description="Human readable summary.")
    path: str = Field(description="Request path that failed.")
    details: dict[str, str] | None = Field(
        default=None, description="Per-field messages for validation failures."
    )


def _error_response(
    request: Request,
    status_code: int,
    error: str,
    message: str,
    details: dict[str, str] | None = None,
) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(UTC),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
        details=details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def handle_validation_error(request: Request, exc: TaskValidationError) -> JSONResponse:
    logger.warning(
        "Validation failed",
        extra={"path": request.url.path, "fields": sorted(exc.errors)},
    )
    return _error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Input data failed validation.",
        exc.errors,
    )


async def handle_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    logger.warning("Task not found", extra={"path": request.url.path, "task_id": exc.task_id})
    return _error_response(
        request,
        status.HTTP_404_NOT_FOUND,
        "RESOURCE_NOT_FOUND",
        "Resource not found.",
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error", extra={"path": request.url.path})
    return _error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TaskValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(TaskNotFoundError, handle_not_found)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
