from __future__ import annotations

from collections.abc import Sequence

from pydantic import BaseModel, Field

from src.tracker.domain.models.task import Task


class TaskSnapshot(BaseModel):
    """Outcome of one read of the remote task collection.

    ``available`` separates "could not fetch" from "fetched zero tasks".
    """

    available: bool = Field(description="Whether the source answered with a valid collection.")
    tasks: list[Task] = Field(default_factory=list, description="Tasks read from the source.")
    reason: str | None = Field(default=None, description="Failure description, if unavailable.")

    @classmethod
    def of(cls, tasks: Sequence[Task]) -> TaskSnapshot:
        return cls(available=True, tasks=list(tasks))

    @classmethod
    def unavailable(cls, reason: str) -> TaskSnapshot:
        return cls(available=False, reason=reason)
