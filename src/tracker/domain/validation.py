from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.tracker.domain.exceptions import TaskValidationError
from src.tracker.domain.models.task import Task
from src.tracker.domain.models.task_draft import TaskDraft

_TAG_MESSAGE = "Tags must be 2-20 characters of lowercase letters, digits and hyphens: "


class ValidationResult(BaseModel):
    errors: dict[str, str] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        if self.errors:
            raise TaskValidationError(self.errors)


class TaskValidator:
    """Field-level checks applied to a task before it is written.

    The task is re-read through ``TaskDraft`` and pydantic's errors are
    folded into one message per offending field, keyed by wire name.
    """

    def validate(self, task: Task) -> ValidationResult:
        try:
            TaskDraft.model_validate(task.model_dump(by_alias=True))
        except ValidationError as exc:
            return ValidationResult(errors=_fold_errors(exc))
        return ValidationResult()


def _fold_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    invalid_tags: list[str] = []
    for error in exc.errors():
        loc = error["loc"]
        name = str(loc[0]) if loc else "task"
        if name == "tags" and len(loc) > 1:
            invalid_tags.append(str(error["input"]))
            continue
        errors.setdefault(name, _describe(name, error))
    if invalid_tags and "tags" not in errors:
        errors["tags"] = _TAG_MESSAGE + ", ".join(sorted(invalid_tags))
    return errors


def _describe(name: str, error: Any) -> str:
    if error["type"] == "missing" or error.get("input", "") is None:
        return f"{name} is required."
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    return error["msg"]


def validate_task(task: Task) -> ValidationResult:
    return TaskValidator().validate(task)
