from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TaskStatistics(BaseModel):
    """Aggregate metrics derived from one snapshot of the task collection."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    total: int = Field(default=0, description="Number of tasks in the snapshot.")
    completed: int = Field(default=0, description="Number of completed tasks.")
    pending: int = Field(default=0, description="Number of tasks not yet completed.")
    urgent_active: int = Field(default=0, description="Open tasks with URGENT priority.")
    overdue: int = Field(default=0, description="Open tasks whose due date has passed.")
    completion_rate: float = Field(default=0.0, description="Completed share in percent (0-100).")
    by_priority: dict[str, int] = Field(
        default_factory=dict, description="Task count per priority label present."
    )
    by_category: dict[str, int] = Field(
        default_factory=dict, description="Task count per category label present."
    )

    @classmethod
    def empty(cls) -> TaskStatistics:
        return cls()
